from pathlib import Path

from api_traceability.generator.docs import generate_documentation
from api_traceability.parser.loader import load_spec_file

FIXTURES = Path(__file__).parent / "fixtures"


class TestGenerateDocumentation:
    def test_petstore(self):
        doc = generate_documentation(load_spec_file(FIXTURES / "petstore.yaml"))
        assert doc.startswith("# Petstore\n\nSample pet store API\n\n**Version:** 1.0.0\n")
        assert "## Servers\n\n- https://petstore.example.com/v1 - Production\n" in doc
        assert "## pets\n\n### GET /pets\n\nList all pets\n" in doc
        assert "## Untagged" in doc
        assert "Returns stock counts per pet." in doc
        assert doc.index("## pets") < doc.index("## Untagged")

    def test_minimal(self):
        doc = generate_documentation({"info": {"title": "Bare", "version": "0.1"}, "paths": {}})
        assert doc == "# Bare\n\n**Version:** 0.1\n"

    def test_tolerates_non_mapping_values(self):
        doc = generate_documentation(
            {
                "info": "not a mapping",
                "servers": ["https://a.example.com", 7, {"url": "https://b.example.com"}],
                "paths": {"/ping": {"get": {"tags": 5}}},
            }
        )
        assert doc.startswith("# \n\n**Version:** \n")
        assert "## Servers\n\n- https://a.example.com\n- https://b.example.com\n" in doc
        assert "## Untagged\n\n### GET /ping" in doc

    def test_servers_not_a_list(self):
        doc = generate_documentation({"info": {"title": "T", "version": "1"}, "servers": "x", "paths": {}})
        assert "## Servers" not in doc
