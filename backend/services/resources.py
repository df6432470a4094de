"""Typed views over SWAPI resources.

SWAPI reports most numbers as strings ("unknown", "n/a", "1000000"), so
display fields accept any JSON scalar. Every field is optional and unknown
fields are ignored; the report printers skip output for what is absent.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

Scalar = str | int | float | bool | None


class Resource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Scalar = None


class Character(Resource):
    height: Scalar = None
    mass: Scalar = None
    birth_year: Scalar = None
    films: list[Any] | None = None


class Starship(Resource):
    model: Scalar = None
    manufacturer: Scalar = None
    cost_in_credits: Scalar = None
    max_atmosphering_speed: Scalar = None
    hyperdrive_rating: Scalar = None
    pilots: list[Any] | None = None


class Vehicle(Resource):
    model: Scalar = None
    manufacturer: Scalar = None
    cost_in_credits: Scalar = None
    length: Scalar = None
    crew: Scalar = None
    passengers: Scalar = None


class Planet(Resource):
    population: Scalar = None
    diameter: Scalar = None
    climate: Scalar = None
    films: list[Any] | None = None


class Film(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Scalar = None
    release_date: Scalar = None
    director: Scalar = None
    producer: Scalar = None
    characters: list[Any] | None = None
    planets: list[Any] | None = None


class Page(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: Scalar = None


class StarshipPage(Page):
    results: list[Starship | None] = []


class PlanetPage(Page):
    results: list[Planet | None] = []


class FilmPage(Page):
    results: list[Film | None] = []
