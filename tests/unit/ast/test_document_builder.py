"""Unit tests for the document builder and inline factories."""

import pytest

from md2confluence.ast import (
    DocumentBuilder,
    NodeType,
    code,
    emphasis,
    image,
    link,
    list_item,
    list_node,
    paragraph,
    strong,
    table,
)


@pytest.mark.unit
class TestInlineFactories:
    """Tests for the inline factory helpers."""

    def test_strings_become_text(self) -> None:
        """Bare strings are wrapped in Text nodes."""
        node = strong("bold ", emphasis("both"))
        children = list(node.children)
        assert children[0].type is NodeType.TEXT
        assert children[0].literal == "bold "
        assert children[1].type is NodeType.EMPHASIS

    def test_link(self) -> None:
        """Links carry destination, title and content."""
        node = link("http://example.com/", "Example", title="t")
        assert node.destination == "http://example.com/"
        assert node.title == "t"
        assert [child.literal for child in node.children] == ["Example"]

    def test_image_keeps_alt_text_as_literal(self) -> None:
        """Image alt text is stored on the node, not as children."""
        node = image("./sample.png", alt_text="sample")
        assert node.literal == "sample"
        assert list(node.children) == []

    def test_code(self) -> None:
        """Inline code is a leaf with a literal."""
        node = code("foo")
        assert node.type is NodeType.CODE and node.literal == "foo"


@pytest.mark.unit
class TestBlockFactories:
    """Tests for list and table factories."""

    def test_list_items_inherit_ordered(self) -> None:
        """Items of an ordered list are marked ordered."""
        node = list_node("a", list_item("b"), ordered=True)
        assert node.ordered
        assert all(item.ordered for item in node.children)

    def test_list_item_strings_become_paragraphs(self) -> None:
        """Bare item strings become single-paragraph bodies."""
        item = list_item("a")
        assert [child.type for child in item.children] == [NodeType.PARAGRAPH]

    def test_table_structure(self) -> None:
        """Tables have a head row of header cells and body rows of plain cells."""
        node = table(["a", "b"], [["1", "2"]])
        head, body = list(node.children)
        assert head.type is NodeType.TABLE_HEAD
        assert body.type is NodeType.TABLE_BODY
        head_cells = list(head.first_child.children)
        body_cells = list(body.first_child.children)
        assert all(cell.is_header for cell in head_cells)
        assert not any(cell.is_header for cell in body_cells)

    def test_table_without_rows_has_no_body(self) -> None:
        """An empty row list omits the TableBody."""
        node = table(["a"], [])
        assert [child.type for child in node.children] == [NodeType.TABLE_HEAD]

    def test_table_cell_with_inline_nodes(self) -> None:
        """Cells accept sequences of inline nodes."""
        node = table([[strong("a")]], [])
        cell = node.first_child.first_child.first_child
        assert cell.first_child.type is NodeType.STRONG


@pytest.mark.unit
class TestDocumentBuilder:
    """Tests for DocumentBuilder."""

    def test_chaining_builds_document(self) -> None:
        """Each method appends a block and returns the builder."""
        doc = (
            DocumentBuilder()
            .heading(2, "Title")
            .paragraph("text")
            .code_block("x = 1\n", info="python")
            .block_quote(paragraph("quoted"))
            .list("a", "b")
            .table(["h"], [["c"]])
            .horizontal_rule()
            .html_block("<div></div>")
            .get_document()
        )
        assert doc.type is NodeType.DOCUMENT
        assert [child.type for child in doc.children] == [
            NodeType.HEADING,
            NodeType.PARAGRAPH,
            NodeType.CODE_BLOCK,
            NodeType.BLOCK_QUOTE,
            NodeType.LIST,
            NodeType.TABLE,
            NodeType.HORIZONTAL_RULE,
            NodeType.RAW_HTML_BLOCK,
        ]

    def test_heading_level_stored_unclamped(self) -> None:
        """Out-of-range levels are kept on the node."""
        doc = DocumentBuilder().heading(9, "deep").get_document()
        assert doc.first_child.level == 9

    def test_code_block_payload(self) -> None:
        """Code blocks keep literal and info."""
        doc = DocumentBuilder().code_block("body\n", info="tip").get_document()
        assert doc.first_child.literal == "body\n"
        assert doc.first_child.info == "tip"

    def test_add_arbitrary_node(self) -> None:
        """add appends any prebuilt node."""
        node = paragraph("x")
        doc = DocumentBuilder().add(node).get_document()
        assert doc.first_child is node
        assert node.parent is doc
