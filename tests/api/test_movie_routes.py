"""Movie routes — listing, genre filter, create, update, delete over HTTP.

Invariants:
    - GET /movies sorted by title ascending, genre and language embedded
    - GET /movies/{genre_name} matches genre name ignoring case
    - POST /movies → 201; same title in any case → 409 without a second row
    - PUT/DELETE on an unknown id → 404 and data unchanged
"""

from sqlalchemy import func, select

from cinecatalog.models.movie import Movie


async def _movie_count(test_db) -> int:
    result = await test_db.execute(select(func.count()).select_from(Movie))
    return result.scalar_one()


def _new_movie_payload(seed_catalog, **overrides) -> dict:
    payload = {
        "title": "Parasite",
        "genre_id": seed_catalog["genres"]["drama"].id,
        "language_id": seed_catalog["languages"]["english"].id,
        "oscar_count": 4,
        "release_date": "2019-05-30",
    }
    payload.update(overrides)
    return payload


# --- GET /movies ---------------------------------------------------------------

async def test_list_movies_sorted_by_title(client, seed_catalog):
    res = await client.get("/movies")
    assert res.status_code == 200
    titles = [m["title"] for m in res.json()]
    assert titles == ["Amadeus", "Central Station", "The Godfather"]


async def test_list_movies_embeds_genre_and_language(client, seed_catalog):
    res = await client.get("/movies")
    godfather = next(m for m in res.json() if m["title"] == "The Godfather")
    assert godfather["genre"]["name"] == "Drama"
    assert godfather["language"]["name"] == "English"
    assert godfather["release_date"] == "1972-03-24"
    assert godfather["oscar_count"] == 3


async def test_list_movies_empty_catalog(client):
    res = await client.get("/movies")
    assert res.status_code == 200
    assert res.json() == []


# --- GET /movies/{genre_name} --------------------------------------------------

async def test_filter_by_genre_name_is_case_insensitive(client, seed_catalog):
    res = await client.get("/movies/dRaMa")
    assert res.status_code == 200
    titles = [m["title"] for m in res.json()]
    assert titles == ["Central Station", "The Godfather"]
    assert all(m["genre"]["name"] == "Drama" for m in res.json())


async def test_filter_by_unknown_genre_returns_empty_list(client, seed_catalog):
    res = await client.get("/movies/western")
    assert res.status_code == 200
    assert res.json() == []


async def test_filter_failure_returns_500_with_message(
    client, seed_catalog, monkeypatch,
):
    async def boom(self, genre_name):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(
        "cinecatalog.services.movie_service.MovieService.list_by_genre_name",
        boom,
    )
    res = await client.get("/movies/drama")
    assert res.status_code == 500
    assert res.json() == {"message": "Failed to filter movies"}


# --- POST /movies --------------------------------------------------------------

async def test_create_movie_returns_201_with_movie(client, seed_catalog):
    res = await client.post("/movies", json=_new_movie_payload(seed_catalog))
    assert res.status_code == 201
    body = res.json()
    assert body["title"] == "Parasite"
    assert body["release_date"] == "2019-05-30"
    assert body["genre"]["name"] == "Drama"
    assert body["language"]["name"] == "English"


async def test_create_movie_duplicate_title_any_case_returns_409(
    client, seed_catalog, test_db,
):
    before = await _movie_count(test_db)
    res = await client.post(
        "/movies", json=_new_movie_payload(seed_catalog, title="the GODFATHER"),
    )
    assert res.status_code == 409
    assert res.json() == {"message": "A movie with this title already exists"}
    assert await _movie_count(test_db) == before


async def test_create_movie_oscar_count_defaults_to_zero(client, seed_catalog):
    payload = _new_movie_payload(seed_catalog)
    del payload["oscar_count"]
    res = await client.post("/movies", json=payload)
    assert res.status_code == 201
    assert res.json()["oscar_count"] == 0


async def test_create_movie_invalid_date_returns_400(client, seed_catalog):
    res = await client.post(
        "/movies", json=_new_movie_payload(seed_catalog, release_date="someday"),
    )
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid request data"
    assert any(d["field"].endswith("release_date") for d in body["details"])


async def test_create_movie_accepts_iso_timestamp(client, seed_catalog):
    res = await client.post(
        "/movies",
        json=_new_movie_payload(
            seed_catalog, release_date="2019-05-30T03:00:00.000Z",
        ),
    )
    assert res.status_code == 201
    assert res.json()["release_date"] == "2019-05-30"


async def test_create_movie_unknown_genre_fails_without_row(
    client, seed_catalog, test_db,
):
    before = await _movie_count(test_db)
    res = await client.post(
        "/movies", json=_new_movie_payload(seed_catalog, genre_id=999),
    )
    assert res.status_code == 500
    assert res.json() == {"message": "Failed to register the movie"}
    assert await _movie_count(test_db) == before
    assert (await client.get("/movies")).status_code == 200


async def test_create_movie_failure_returns_500(client, seed_catalog, monkeypatch):
    async def boom(self, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(
        "cinecatalog.services.movie_service.MovieService.create", boom,
    )
    res = await client.post("/movies", json=_new_movie_payload(seed_catalog))
    assert res.status_code == 500
    assert res.json() == {"message": "Failed to register the movie"}


# --- PUT /movies/{id} ----------------------------------------------------------

async def test_update_movie_merges_supplied_fields(client, seed_catalog):
    amadeus = seed_catalog["movies"]["Amadeus"]
    drama = seed_catalog["genres"]["drama"]

    res = await client.put(
        f"/movies/{amadeus.id}",
        json={"genre_id": drama.id, "release_date": "1985-01-01"},
    )
    assert res.status_code == 200
    assert res.json() == {"message": "Movie updated successfully"}

    listed = (await client.get("/movies")).json()
    updated = next(m for m in listed if m["id"] == amadeus.id)
    assert updated["genre"]["name"] == "Drama"
    assert updated["release_date"] == "1985-01-01"
    assert updated["title"] == "Amadeus"
    assert updated["oscar_count"] == 8


async def test_update_movie_accepts_iso_timestamp(client, seed_catalog):
    amadeus = seed_catalog["movies"]["Amadeus"]
    res = await client.put(
        f"/movies/{amadeus.id}",
        json={"release_date": "1985-02-01T12:30:00.000Z"},
    )
    assert res.status_code == 200

    listed = (await client.get("/movies")).json()
    updated = next(m for m in listed if m["id"] == amadeus.id)
    assert updated["release_date"] == "1985-02-01"


async def test_update_movie_null_fields_left_unchanged(client, seed_catalog):
    amadeus = seed_catalog["movies"]["Amadeus"]
    res = await client.put(
        f"/movies/{amadeus.id}", json={"title": None, "release_date": None},
    )
    assert res.status_code == 200

    listed = (await client.get("/movies")).json()
    unchanged = next(m for m in listed if m["id"] == amadeus.id)
    assert unchanged["title"] == "Amadeus"
    assert unchanged["release_date"] == "1984-09-19"


async def test_update_missing_movie_returns_404(client, seed_catalog):
    before = (await client.get("/movies")).json()

    res = await client.put("/movies/999", json={"title": "X"})
    assert res.status_code == 404
    assert res.json() == {"message": "Movie not found"}
    assert (await client.get("/movies")).json() == before


async def test_update_movie_non_integer_id_returns_400(client):
    res = await client.put("/movies/abc", json={"title": "X"})
    assert res.status_code == 400


# --- DELETE /movies/{id} -------------------------------------------------------

async def test_delete_movie_removes_row(client, seed_catalog, test_db):
    godfather = seed_catalog["movies"]["The Godfather"]
    before = await _movie_count(test_db)

    res = await client.delete(f"/movies/{godfather.id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Movie removed successfully"}
    assert await _movie_count(test_db) == before - 1


async def test_delete_missing_movie_returns_404(client, seed_catalog, test_db):
    before = await _movie_count(test_db)
    res = await client.delete("/movies/999")
    assert res.status_code == 404
    assert await _movie_count(test_db) == before


# --- Locale --------------------------------------------------------------------

async def test_messages_follow_configured_locale(client, seed_catalog, pt_br_locale):
    res = await client.put("/movies/999", json={"title": "X"})
    assert res.status_code == 404
    assert res.json() == {"message": "O filme não foi encontrado"}

    res = await client.post(
        "/movies", json=_new_movie_payload(seed_catalog, title="amadeus"),
    )
    assert res.status_code == 409
    assert res.json() == {"message": "Já existe um filme com esse título"}


async def test_update_movie_does_not_check_title_uniqueness(client, seed_catalog):
    amadeus = seed_catalog["movies"]["Amadeus"]
    res = await client.put(
        f"/movies/{amadeus.id}", json={"title": "the godfather"},
    )
    assert res.status_code == 200
    titles = [m["title"] for m in (await client.get("/movies")).json()]
    assert titles.count("the godfather") == 1
