# tests/conftest.py
from __future__ import annotations

import pytest
import respx

from config import Settings
from services.context import AppContext

BASE_URL = "https://swapi.test/api/"


def make_person(name: str = "Luke Skywalker", films: int = 4) -> dict:
    return {
        "name": name,
        "height": "172",
        "mass": "77",
        "birth_year": "19BBY",
        "films": [f"{BASE_URL}films/{i}/" for i in range(1, films + 1)],
    }


def make_starship(name: str, cost: str = "150000", pilots: int = 0) -> dict:
    return {
        "name": name,
        "model": f"{name} model",
        "manufacturer": "Kuat Drive Yards",
        "cost_in_credits": cost,
        "max_atmosphering_speed": "950",
        "hyperdrive_rating": "2.0",
        "pilots": [f"{BASE_URL}people/{i}/" for i in range(1, pilots + 1)],
    }


def make_planet(name: str, population: str, diameter: str, films: int = 1) -> dict:
    return {
        "name": name,
        "population": population,
        "diameter": diameter,
        "climate": "temperate",
        "films": [f"{BASE_URL}films/{i}/" for i in range(1, films + 1)],
    }


def make_film(title: str, release_date: str) -> dict:
    return {
        "title": title,
        "release_date": release_date,
        "director": "George Lucas",
        "producer": "Gary Kurtz",
        "characters": ["a", "b", "c"],
        "planets": ["x"],
    }


def make_vehicle(name: str = "Sand Crawler") -> dict:
    return {
        "name": name,
        "model": "Digger Crawler",
        "manufacturer": "Corellia Mining Corporation",
        "cost_in_credits": "150000",
        "length": "36.8",
        "crew": "46",
        "passengers": "30",
    }


def page(results: list, count: int | None = None) -> dict:
    return {"count": len(results) if count is None else count, "next": None, "previous": None, "results": results}


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("SWAPI_BASE_URL", BASE_URL)
    monkeypatch.delenv("SWAPI_TIMEOUT_MS", raising=False)
    return Settings()


@pytest.fixture
def ctx(settings: Settings) -> AppContext:
    return AppContext(settings=settings)


@pytest.fixture
def swapi_mock():
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def happy_swapi(swapi_mock):
    """Mock every endpoint a sequence touches: people 1-9, vehicles 1-6."""
    for i in range(1, 10):
        swapi_mock.get(f"{BASE_URL}people/{i}", name=f"people/{i}").respond(200, json=make_person(f"Person {i}"))
    for i in range(1, 7):
        swapi_mock.get(f"{BASE_URL}vehicles/{i}").respond(200, json=make_vehicle(f"Vehicle {i}"))
    swapi_mock.get(f"{BASE_URL}starships/?page=1", name="starships").respond(
        200, json=page([make_starship(f"Ship {i}") for i in range(5)], count=36)
    )
    swapi_mock.get(f"{BASE_URL}planets/?page=1").respond(
        200,
        json=page(
            [
                make_planet("Tatooine", "200000", "10465"),
                make_planet("Coruscant", "1000000000000", "12240", films=4),
                make_planet("Naboo", "4500000000", "12120", films=4),
            ]
        ),
    )
    swapi_mock.get(f"{BASE_URL}films/").respond(
        200,
        json=page(
            [
                make_film("The Empire Strikes Back", "1980-05-17"),
                make_film("A New Hope", "1977-05-25"),
                make_film("Return of the Jedi", "1983-05-25"),
            ]
        ),
    )
    return swapi_mock
