"""Unit tests for the document composer."""

from opmanifest.core.models import RenderedFragment
from opmanifest.rendering.composer import DOCUMENT_SEPARATOR, compose_document


def _fragments(*names: str) -> list[RenderedFragment]:
    return [RenderedFragment(name=name, body=f"kind: {name}\n") for name in names]


class TestComposeDocument:
    """Tests for compose_document."""

    def test_exact_layout(self) -> None:
        """Headers, bodies and separators follow the fixed format."""
        document = compose_document(
            [
                RenderedFragment(name="rbac.yaml", body="a: 1\n"),
                RenderedFragment(name="deployment.yaml", body="b: 2\n"),
            ]
        )

        assert document == (
            "## rbac.yaml\na: 1\n\n"
            "\n---\n\n"
            "## deployment.yaml\nb: 2\n\n"
        )

    def test_single_fragment_has_no_separator(self) -> None:
        """A lone fragment is not preceded by a separator."""
        document = compose_document(_fragments("only.yaml"))

        assert document == "## only.yaml\nkind: only.yaml\n\n"

    def test_separator_and_header_counts(self) -> None:
        """N fragments give N headers and N-1 separators."""
        names = ["a.yaml", "b.yaml", "c.yaml", "d.yaml"]
        document = compose_document(_fragments(*names))

        assert document.count(DOCUMENT_SEPARATOR) == len(names) - 1
        headers = [line for line in document.splitlines() if line.startswith("## ")]
        assert len(headers) == len(names)

    def test_preserves_order(self) -> None:
        """Headers appear in input order, not sorted."""
        names = ["zeta.yaml", "alpha.yaml", "mid.yaml"]
        document = compose_document(_fragments(*names))

        headers = [line[3:] for line in document.splitlines() if line.startswith("## ")]
        assert headers == names

    def test_bodies_are_verbatim(self) -> None:
        """Bodies are copied without modification, including duplicates."""
        body = "  indented: true\n\n\ntrailing: ''"
        document = compose_document(
            [
                RenderedFragment(name="same.yaml", body=body),
                RenderedFragment(name="same.yaml", body=body),
            ]
        )

        assert document.count(body) == 2
        assert document.count("## same.yaml\n") == 2

    def test_empty_input(self) -> None:
        """No fragments compose to an empty document."""
        assert compose_document([]) == ""
