import unittest

from app.errors import SchemaError
from app.models import (
    Country,
    DashboardSnapshot,
    NewsArticle,
    PokemonRecord,
    validate_list,
    validate_mapping,
    validate_payload,
)


class TestModels(unittest.TestCase):
    def test_country_optional_fields_default_empty(self):
        country = Country.model_validate({
            "name": {"common": "Antarctica", "official": "Antarctica"},
            "region": "Antarctic",
            "population": 1000,
            "flags": {"png": "p", "svg": "s"},
            "area": 14000000,
            "cca3": "ATA",
            "tld": [".aq"],
        })
        self.assertEqual(country.capital, [])
        self.assertEqual(country.currencies, {})
        self.assertEqual(country.subregion, "")

    def test_pokemon_official_artwork_alias(self):
        record = PokemonRecord.model_validate({
            "id": 25,
            "name": "pikachu",
            "height": 4,
            "weight": 60,
            "sprites": {
                "front_default": "front.png",
                "other": {"official-artwork": {"front_default": "art.png"}},
            },
        })
        self.assertEqual(record.sprites.other.official_artwork.front_default, "art.png")

    def test_news_article_camel_case_round_trip(self):
        article = NewsArticle.model_validate({
            "source": {"id": None, "name": "Example"},
            "title": "t",
            "url": "https://example.com",
            "urlToImage": "https://example.com/i.png",
            "publishedAt": "2024-01-01T00:00:00Z",
        })
        dumped = article.model_dump(by_alias=True)
        self.assertEqual(dumped["urlToImage"], "https://example.com/i.png")
        self.assertIn("publishedAt", dumped)

    def test_empty_snapshot_dumps_every_key_as_null(self):
        dumped = DashboardSnapshot().model_dump(by_alias=True)
        self.assertEqual(len(dumped), 8)
        self.assertTrue(all(value is None for value in dumped.values()))


class TestValidationHelpers(unittest.TestCase):
    def test_validate_payload_raises_schema_error(self):
        with self.assertRaises(SchemaError) as ctx:
            validate_payload(Country, {"name": "not an object"}, context="country")
        self.assertEqual(ctx.exception.status_code, 502)
        self.assertIn("country", str(ctx.exception))

    def test_validate_list_rejects_object(self):
        with self.assertRaises(SchemaError):
            validate_list(Country, {"status": 404}, context="countries")

    def test_validate_mapping(self):
        self.assertEqual(validate_mapping({"id": "bitcoin"}, context="coin"), {"id": "bitcoin"})
        with self.assertRaises(SchemaError):
            validate_mapping(["bitcoin"], context="coin")


if __name__ == "__main__":
    unittest.main()
