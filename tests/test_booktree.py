from structlab.booktree import BookNode, main


def test_single_node_render():
    assert BookNode("Book").render() == "Book\n"


def test_add_child_returns_child_and_keeps_order():
    root = BookNode("Book")
    first = root.add_child(BookNode("Ch1"))
    second = root.add_child(BookNode("Ch2"))
    assert first.name == "Ch1"
    assert [c.name for c in root.children] == ["Ch1", "Ch2"]
    assert second is root.children[-1]


def test_nested_render_indents_by_level():
    root = BookNode("Book")
    chapter = root.add_child(BookNode("Ch1"))
    section = chapter.add_child(BookNode("Sec1"))
    section.add_child(BookNode("Sub1"))
    root.add_child(BookNode("Ch2"))
    assert root.render() == "Book\n  Ch1\n    Sec1\n      Sub1\n  Ch2\n"


def test_render_line_count_matches_node_count():
    root = BookNode("Book")
    for i in range(3):
        chapter = root.add_child(BookNode(f"Ch{i}"))
        for j in range(2):
            chapter.add_child(BookNode(f"Sec{i}.{j}"))
    lines = root.render().splitlines()
    assert len(lines) == 1 + 3 + 3 * 2
    assert all(line.lstrip() for line in lines)


def test_main_builds_structure(monkeypatch, capsys):
    answers = iter(["Ch1", "1", "Sec1", "1", "Sub1", "1", "Sub2", "0", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Book Structure:\n  Ch1\n    Sec1\n      Sub1\n      Sub2\n" in out


def test_main_multiple_chapters(monkeypatch, capsys):
    answers = iter(["Intro", "0", "1", "Outro", "0", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    main([])
    assert "Book Structure:\n  Intro\n  Outro\n" in capsys.readouterr().out