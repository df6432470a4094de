"""Console reports for SWAPI resources.

Reports are the program's output and go to stdout; diagnostics go through
logging.
"""

from config import parse_leading_int
from services.resources import Character, Film, Planet, PlanetPage, Starship, StarshipPage, Vehicle

MAX_STARSHIPS = 3
LARGE_PLANET_MIN_POPULATION = 1_000_000_000
LARGE_PLANET_MIN_DIAMETER = 10_000


def print_character(person: Character) -> None:
    print("Character:", person.name)
    print("Height:", person.height)
    print("Mass:", person.mass)
    print("Birthday:", person.birth_year)
    if person.films:
        print("Appears in", len(person.films), "films")


def format_starship_cost(cost) -> str:
    """Show the cost in credits, passing the "unknown" sentinel through."""
    return "unknown" if cost == "unknown" else f"{cost} credits"


def print_starship(ship: Starship, index: int) -> None:
    print(f"\nStarship {index + 1}:")
    print("Name:", ship.name)
    print("Model:", ship.model)
    print("Manufacturer:", ship.manufacturer)
    print("Cost:", format_starship_cost(ship.cost_in_credits))
    print("Speed:", ship.max_atmosphering_speed)
    print("Hyperdrive Rating:", ship.hyperdrive_rating)
    if ship.pilots:
        print("Pilots:", len(ship.pilots))


def print_starships(page: StarshipPage) -> int:
    """Print the total and the first three ships. Returns how many were printed."""
    print("\nTotal Starships:", page.count)
    printed = 0
    for index, ship in enumerate(page.results[:MAX_STARSHIPS]):
        if ship is not None:
            print_starship(ship, index)
            printed += 1
    return printed


def is_large_planet(planet: Planet) -> bool:
    population = parse_leading_int(planet.population)
    diameter = parse_leading_int(planet.diameter)
    return (
        population is not None
        and population > LARGE_PLANET_MIN_POPULATION
        and diameter is not None
        and diameter > LARGE_PLANET_MIN_DIAMETER
    )


def print_planet(planet: Planet) -> None:
    print(f"{planet.name} - Pop: {planet.population} - Diameter: {planet.diameter} - Climate: {planet.climate}")
    if planet.films:
        print(f"  Appears in {len(planet.films)} films")


def print_large_planets(page: PlanetPage) -> list[Planet]:
    """Print large populated planets in list order and return them."""
    print("\nLarge populated planets:")
    large = [p for p in page.results if p is not None and is_large_planet(p)]
    for planet in large:
        print_planet(planet)
    return large


def print_films(films: list[Film]) -> None:
    """Print films as given; callers sort them by release date first."""
    print("\nStar Wars Films in chronological order:")
    for index, film in enumerate(films, start=1):
        print(f"{index}. {film.title} ({film.release_date})")
        print(f"   Director: {film.director}")
        print(f"   Producer: {film.producer}")
        print(f"   Characters: {len(film.characters or [])}")
        print(f"   Planets: {len(film.planets or [])}")


def print_vehicle(vehicle: Vehicle) -> None:
    # No "unknown" special case here, unlike starships.
    print("\nFeatured Vehicle:")
    print("Name:", vehicle.name)
    print("Model:", vehicle.model)
    print("Manufacturer:", vehicle.manufacturer)
    print("Cost:", vehicle.cost_in_credits, "credits")
    print("Length:", vehicle.length)
    print("Crew Required:", vehicle.crew)
    print("Passengers:", vehicle.passengers)
