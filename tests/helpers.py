from catalog_api.app.schemas.resource import ResourceCreate


def make_resource(**overrides) -> ResourceCreate:
    fields = {
        "resource_name": "Intro to SQL",
        "author_name": "A. Author",
        "url": "https://example.com/sql",
        "description": "Joins, indexes and transactions",
        "content_type": "article",
        "build_stage": "week 2",
        "opinion": "recommended",
        "opinion_reason": "clear examples",
        "user_id": 1,
    }
    fields.update(overrides)
    return ResourceCreate(**fields)


def count_rows(connection, table: str) -> int:
    return connection.execute(f"SELECT COUNT(*) AS n FROM {table}").fetchone()["n"]
