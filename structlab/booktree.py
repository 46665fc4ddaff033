"""Hierarchical book structure of chapters, sections and subsections."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

INDENT = "  "


@dataclass
class BookNode:
    """A named node in the book hierarchy with ordered children."""

    name: str
    children: list[BookNode] = field(default_factory=list)

    def add_child(self, child: BookNode) -> BookNode:
        """Append ``child`` after the existing children and return it."""
        self.children.append(child)
        return child

    def _lines(self, level: int) -> Iterator[str]:
        yield f"{INDENT * level}{self.name}\n"
        for child in self.children:
            yield from child._lines(level + 1)

    def render(self) -> str:
        """Return the tree as indented lines, two spaces per level."""
        return "".join(self._lines(0))


def _ask_yes(prompt: str) -> bool:
    try:
        return int(input(prompt).strip()) == 1
    except ValueError:
        return False


def _add_subsections(section: BookNode) -> None:
    while True:
        section.add_child(BookNode(input("Enter Subsection Name: ")))
        if not _ask_yes(
            "Do you want to add more Subsections to this Section? (1 for Yes, 0 for No): "
        ):
            return


def _add_section(chapter: BookNode) -> None:
    section = chapter.add_child(BookNode(input("Enter Section Name: ")))
    if _ask_yes("Do you want to add Subsections to this Section? (1 for Yes, 0 for No): "):
        _add_subsections(section)


def _add_chapter(book: BookNode) -> None:
    chapter = book.add_child(BookNode(input("Enter Chapter Name: ")))
    if _ask_yes("Do you want to add Sections to this Chapter? (1 for Yes, 0 for No): "):
        _add_section(chapter)


def main(argv: list[str] | None = None) -> int:
    """Build a book structure interactively and print it."""
    book = BookNode("Book Structure:")
    try:
        while True:
            _add_chapter(book)
            if not _ask_yes("Do you want to add another Chapter? (1 for Yes, 0 for No): "):
                break
    except EOFError:
        print()
    print("\nFinal Book Structure:")
    print(book.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())