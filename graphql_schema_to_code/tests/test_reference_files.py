import unittest
from pathlib import Path
from unittest import TestCase

from graphql_schema_to_code.pipeline import SchemaGenerator

SCHEMAS_DIR = Path(__file__).parent / "test_data" / "schemas"


def graphql_schema_to_code(path):
    with open(path) as f:
        sdl = f.read()
    return SchemaGenerator(sdl).generate()


class TestReferenceFiles(TestCase):
    def test_starwars(self):
        result = graphql_schema_to_code(SCHEMAS_DIR / "starwars.graphql")

        out = Path(__file__).parent / "schemas_out"
        out.mkdir(exist_ok=True)
        with open(out / "starwars.py", "w") as f:
            f.write(result.code)

        with open(SCHEMAS_DIR / "starwars.py") as f:
            ref = f.read()
        self.assertEqual(result.code, ref)

    def test_starwars_warnings(self):
        result = graphql_schema_to_code(SCHEMAS_DIR / "starwars.graphql")
        self.assertEqual(
            result.warnings,
            [
                "Warning: @cached: Directives are not implemented yet!",
                "Warning: Human: Interface inheritance is not yet supported!",
                "Warning: Droid: Interface inheritance is not yet supported!",
            ],
        )


if __name__ == "__main__":
    unittest.main()
