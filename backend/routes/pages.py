"""Demo page with a button that triggers /api."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from services.context import AppContext, get_context

router = APIRouter()

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
    <head>
        <title>Star Wars API Demo</title>
        <style>
            body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
            h1 {{ color: #FFE81F; background-color: #000; padding: 10px; }}
            button {{ background-color: #FFE81F; border: none; padding: 10px 20px; cursor: pointer; }}
            .footer {{ margin-top: 50px; font-size: 12px; color: #666; }}
            pre {{ background: #f4f4f4; padding: 10px; border-radius: 5px; }}
        </style>
    </head>
    <body>
        <h1>Star Wars API Demo</h1>
        <p>This page demonstrates fetching data from the Star Wars API.</p>
        <p>Check your console for the API results.</p>
        <button onclick="fetchData()">Fetch Star Wars Data</button>
        <div id="results"></div>
        <script>
            function fetchData() {{
                document.getElementById('results').innerHTML = '<p>Loading data...</p>';
                fetch('/api')
                    .then(res => res.text())
                    .then(text => {{
                        alert('API request made! Check server console.');
                        document.getElementById('results').innerHTML = '<p>Data fetched! Check server console.</p>';
                    }})
                    .catch(err => {{
                        document.getElementById('results').innerHTML = '<p>Error: ' + err.message + '</p>';
                    }});
            }}
        </script>
        <div class="footer">
            <p>API calls: {api_calls} | Cache entries: {cache_size} | Errors: {errors}</p>
            <pre>Debug mode: {debug} | Timeout: {timeout}</pre>
        </div>
    </body>
</html>
"""


def render_page(ctx: AppContext) -> str:
    stats = ctx.snapshot()
    timeout = f"{stats['timeout']}ms" if stats["timeout"] is not None else "disabled"
    return PAGE_TEMPLATE.format(
        api_calls=stats["api_calls"],
        cache_size=stats["cache_size"],
        errors=stats["errors"],
        debug="ON" if stats["debug"] else "OFF",
        timeout=timeout,
    )


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse)
async def index(ctx: AppContext = Depends(get_context)) -> str:
    return render_page(ctx)
