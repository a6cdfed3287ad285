"""
Unit tests for the todo store and handler.

Tests verify:
- Indices are 1-based line positions
- done removes exactly one line; out-of-range leaves the file unchanged
- clear only empties the store after confirmation
"""

import stat

import pytest

from opskit.core.exceptions import InvalidArgumentError, TodoIndexError
from opskit.services.confirm import StaticConfirmer
from opskit.services.todo import TodoService, TodoStore


@pytest.fixture
def store(tmp_path):
    return TodoStore(tmp_path / "todo" / "list.txt")


@pytest.fixture
def service(store, logger):
    return TodoService(store, StaticConfirmer(True), logger)


class TestTodoStore:
    """Tests for the flat-file store."""

    def test_missing_file_reads_empty(self, store):
        assert store.read() == []

    def test_append_creates_file_and_parents(self, store):
        assert store.append("first") == 1
        assert store.path.read_text() == "first\n"

    def test_append_after_missing_trailing_newline(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("one")
        assert store.append("two") == 2
        assert store.read() == ["one", "two"]

    def test_blank_lines_are_ignored(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("a\n\n  \nb\n")
        assert store.read() == ["a", "b"]

    def test_remove_returns_entry(self, store):
        for entry in ("a", "b", "c"):
            store.append(entry)
        assert store.remove(2) == "b"
        assert store.read() == ["a", "c"]

    def test_clear_empties_file(self, store):
        store.append("a")
        store.clear()
        assert store.read() == []
        assert store.path.exists()

    @pytest.mark.parametrize("rewrite", ["remove", "clear"])
    def test_rewrite_keeps_file_mode(self, store, rewrite):
        store.append("a")
        store.append("b")
        store.path.chmod(0o664)

        if rewrite == "remove":
            store.remove(1)
        else:
            store.clear()

        assert stat.S_IMODE(store.path.stat().st_mode) == 0o664


class TestTodoAdd:
    """Tests for todo add."""

    def test_add_returns_index(self, service):
        assert service.add("buy milk") == (1, "buy milk")
        assert service.add("call bob") == (2, "call bob")

    def test_add_collapses_newlines(self, service, store):
        service.add("line one\nline two")
        assert store.read() == ["line one line two"]

    def test_add_strips_whitespace(self, service):
        assert service.add("  padded  ") == (1, "padded")

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_add_empty_rejected(self, service, store, text):
        with pytest.raises(InvalidArgumentError):
            service.add(text)
        assert not store.path.exists()


class TestTodoDone:
    """Tests for todo done."""

    @pytest.fixture
    def filled(self, service):
        for entry in ("a", "b", "c"):
            service.add(entry)
        return service

    def test_done_removes_exact_line(self, filled):
        assert filled.done(2) == "b"
        assert filled.list() == ["a", "c"]

    def test_done_renumbers_following_entries(self, filled):
        filled.done(1)
        assert filled.done(1) == "b"

    def test_done_accepts_string_index(self, filled):
        assert filled.done("3") == "c"

    @pytest.mark.parametrize("index", [0, -1, 4, 99])
    def test_out_of_range_leaves_store_unchanged(self, filled, store, index):
        before = store.path.read_bytes()
        with pytest.raises(TodoIndexError) as exc_info:
            filled.done(index)
        assert store.path.read_bytes() == before
        assert "valid range is 1-3" in str(exc_info.value)
        assert exc_info.value.exit_code == 1

    def test_done_on_empty_list(self, service):
        with pytest.raises(TodoIndexError, match="the list is empty"):
            service.done(1)

    def test_non_integer_index_is_usage_error(self, filled):
        with pytest.raises(InvalidArgumentError) as exc_info:
            filled.done("two")
        assert exc_info.value.exit_code == 2


class TestTodoClear:
    """Tests for the confirmation-gated clear."""

    def test_clear_confirmed(self, store, logger):
        service = TodoService(store, StaticConfirmer(True), logger)
        service.add("a")
        service.add("b")

        assert service.clear() is True
        assert service.list() == []

    def test_clear_declined_keeps_entries(self, store, logger):
        confirmer = StaticConfirmer(False)
        service = TodoService(store, confirmer, logger)
        service.add("a")
        service.add("b")

        assert service.clear() is False
        assert service.list() == ["a", "b"]
        assert confirmer.asked == ["Clear all 2 todos?"]
        assert "todo: clear cancelled" in logger.messages("info")
