"""Tests for version history rules: append, switch, delete."""

import pytest
from azure.cosmos.exceptions import CosmosHttpResponseError

from blog_studio.exceptions import ProtectedVersionError, VersionOutOfRangeError
from blog_studio.models.document import Document
from blog_studio.services import versions


def _contents(doc: Document) -> list[str]:
    return [v.content for v in doc.versions]


def _assert_invariants(doc: Document) -> None:
    assert len(doc.versions) >= 1
    assert 0 <= doc.current_version < len(doc.versions)
    assert doc.content == doc.versions[doc.current_version].content


class TestAppend:
    """Test appending versions."""

    async def test_append_scenario(self, repo) -> None:
        """Verify A -> append B gives [A, B] with B current."""
        doc = await repo.create(Document.new("A"))

        saved = await versions.append_version(doc, "B", repo, prompt="make it punchier")

        assert _contents(saved) == ["A", "B"]
        assert saved.current_version == 1
        assert saved.versions[1].prompt == "make it punchier"
        assert saved.content == "B"
        assert _contents(await repo.find_by_id(doc.id)) == ["A", "B"]
        _assert_invariants(saved)

    async def test_append_from_older_version_still_goes_last(self, repo, make_document) -> None:
        """Verify appends always land at the end, whatever version is current."""
        doc = await repo.create(make_document("A", "B", "C", current=0))

        saved = await versions.append_version(doc, "D", repo)

        assert _contents(saved) == ["A", "B", "C", "D"]
        assert saved.current_version == 3

    async def test_append_grows_by_exactly_one(self, repo, make_document) -> None:
        """Verify append adds one version and leaves earlier ones intact."""
        doc = await repo.create(make_document("A", "B"))

        saved = await versions.append_version(doc, "C", repo)

        assert len(saved.versions) == len(doc.versions) + 1
        assert saved.current_version == len(saved.versions) - 1

    async def test_append_store_failure_leaves_state_untouched(self, repo) -> None:
        """Verify a failed save changes neither the store nor the caller's object."""
        doc = await repo.create(Document.new("A"))
        repo.fail_saves = True

        with pytest.raises(CosmosHttpResponseError):
            await versions.append_version(doc, "B", repo)

        assert _contents(doc) == ["A"]
        assert doc.current_version == 0
        assert _contents(await repo.find_by_id(doc.id)) == ["A"]


class TestSwitch:
    """Test switching the current version."""

    def test_switch_moves_pointer_and_content(self, make_document) -> None:
        """Verify switching moves the pointer and mirrors the content."""
        doc = make_document("A", "B", "C")

        switched = versions.switch_version(doc, 0)

        assert switched.current_version == 0
        assert switched.content == "A"
        assert _contents(switched) == ["A", "B", "C"]
        assert doc.current_version == 2

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_switch_out_of_range(self, make_document, index: int) -> None:
        """Verify an index outside the history is rejected."""
        doc = make_document("A", "B", "C")

        with pytest.raises(VersionOutOfRangeError):
            versions.switch_version(doc, index)

    async def test_activate_persists_pointer(self, repo, make_document) -> None:
        """Verify activation saves the new pointer."""
        doc = await repo.create(make_document("A", "B"))

        saved = await versions.activate_version(doc, 0, repo)

        stored = await repo.find_by_id(doc.id)
        assert saved.current_version == 0
        assert stored.current_version == 0
        assert stored.content == "A"


class TestDelete:
    """Test deleting versions."""

    async def test_delete_scenario(self, repo) -> None:
        """Verify [A, B] current 1 -> delete 1 gives [A] current 0."""
        doc = await repo.create(Document.new("A"))
        doc = await versions.append_version(doc, "B", repo)

        saved = await versions.delete_version(doc, 1, repo)

        assert _contents(saved) == ["A"]
        assert saved.current_version == 0
        assert saved.content == "A"
        _assert_invariants(saved)

    @pytest.mark.parametrize("contents", [("A",), ("A", "B"), ("A", "B", "C")])
    async def test_delete_original_is_protected(self, repo, make_document, contents) -> None:
        """Verify index 0 can never be deleted and nothing is written."""
        doc = await repo.create(make_document(*contents))
        repo.calls.clear()

        with pytest.raises(ProtectedVersionError):
            await versions.delete_version(doc, 0, repo)

        assert "save" not in repo.calls
        assert _contents(await repo.find_by_id(doc.id)) == list(contents)

    async def test_delete_original_rejected_state_unchanged(self, repo, make_document) -> None:
        """Verify [A, B, C] current 2 -> delete 0 is rejected."""
        doc = await repo.create(make_document("A", "B", "C", current=2))

        with pytest.raises(ProtectedVersionError):
            await versions.delete_version(doc, 0, repo)

        assert _contents(doc) == ["A", "B", "C"]
        assert doc.current_version == 2

    @pytest.mark.parametrize("index", [-1, 3])
    async def test_delete_out_of_range(self, repo, make_document, index: int) -> None:
        """Verify deleting an index outside the history is rejected."""
        doc = await repo.create(make_document("A", "B", "C"))

        with pytest.raises(VersionOutOfRangeError):
            await versions.delete_version(doc, index, repo)

    async def test_delete_preserves_neighbours(self, repo, make_document) -> None:
        """Verify versions before stay put and versions after shift down intact."""
        doc = await repo.create(make_document("A", "B", "C", "D", current=0))
        doc.versions[3].prompt = "shorter"

        saved = await versions.delete_version(doc, 2, repo)

        assert _contents(saved) == ["A", "B", "D"]
        assert saved.versions[0] == doc.versions[0]
        assert saved.versions[1] == doc.versions[1]
        assert saved.versions[2] == doc.versions[3]
        assert saved.versions[2].prompt == "shorter"

    async def test_delete_before_current_keeps_viewed_version(self, repo, make_document) -> None:
        """Verify the pointer follows the version the user was viewing."""
        doc = await repo.create(make_document("A", "B", "C", "D", current=2))

        saved = await versions.delete_version(doc, 1, repo)

        assert _contents(saved) == ["A", "C", "D"]
        assert saved.current_version == 1
        assert saved.content == "C"

    async def test_delete_after_current_leaves_pointer(self, repo, make_document) -> None:
        """Verify deleting a later version keeps the pointer in place."""
        doc = await repo.create(make_document("A", "B", "C", current=1))

        saved = await versions.delete_version(doc, 2, repo)

        assert saved.current_version == 1
        assert saved.content == "B"

    async def test_delete_current_moves_to_successor(self, repo, make_document) -> None:
        """Verify deleting the viewed version shows the one that took its slot."""
        doc = await repo.create(make_document("A", "B", "C", current=1))

        saved = await versions.delete_version(doc, 1, repo)

        assert _contents(saved) == ["A", "C"]
        assert saved.current_version == 1
        assert saved.content == "C"

    async def test_delete_current_last_clamps(self, repo, make_document) -> None:
        """Verify deleting the current last version moves to the new last one."""
        doc = await repo.create(make_document("A", "B", "C", current=2))

        saved = await versions.delete_version(doc, 2, repo)

        assert saved.current_version == 1
        assert saved.content == "B"

    async def test_delete_store_failure_leaves_state_untouched(self, repo, make_document) -> None:
        """Verify a failed save leaves both the caller's and the stored document unchanged."""
        doc = await repo.create(make_document("A", "B"))
        repo.fail_saves = True

        with pytest.raises(CosmosHttpResponseError):
            await versions.delete_version(doc, 1, repo)

        assert _contents(await repo.find_by_id(doc.id)) == ["A", "B"]
        assert _contents(doc) == ["A", "B"]


async def test_invariants_hold_across_mixed_operations(repo) -> None:
    """Verify the pointer stays valid over a sequence of edits."""
    doc = await repo.create(Document.new("v0"))
    _assert_invariants(doc)
    for i in range(1, 5):
        doc = await versions.append_version(doc, f"v{i}", repo)
        _assert_invariants(doc)
    doc = await versions.activate_version(doc, 2, repo)
    for index in (4, 1, 2, 1):
        doc = await versions.delete_version(doc, index, repo)
        _assert_invariants(doc)
    assert _contents(doc) == ["v0"]
