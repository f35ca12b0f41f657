"""
Children's Church API — Document Store Unit Tests
===================================================

What:  Tests for JsonDocumentStore initialize / load / save / mutate.
How:   Real files under pytest's tmp_path; I/O faults are injected with patch.

What we test:
    ✅ First run creates the document with both collections
    ✅ Initialization never overwrites an existing file
    ✅ Corrupt files are reported, never repaired
    ✅ Saves rewrite the whole file
    ✅ Failed mutations leave the file untouched
    ✅ Failed writes surface StoreError and leave no temporary file
    ✅ Concurrent mutations in one process do not lose updates
"""

import asyncio
import json
from unittest.mock import patch

import pytest

from church_api.exceptions import CorruptStoreError, StoreError
from church_api.models.question import Question
from church_api.store import JsonDocumentStore


class TestInitialize:

    @pytest.mark.asyncio
    async def test_creates_empty_document(self, store, data_file):
        created = await store.initialize()

        assert created is True
        assert json.loads(data_file.read_text()) == {
            "qanda_questions": [],
            "scripture_notes": [],
        }

    @pytest.mark.asyncio
    async def test_creates_missing_parent_directory(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "nested" / "dir" / "data.json")

        await store.initialize()

        assert store.path.exists()

    @pytest.mark.asyncio
    async def test_never_overwrites_existing_file(self, seeded_store, data_file):
        before = data_file.read_text()

        created = await seeded_store.initialize()

        assert created is False
        assert data_file.read_text() == before

    @pytest.mark.asyncio
    async def test_written_with_two_space_indent(self, store, data_file):
        await store.initialize()

        assert data_file.read_text() == '{\n  "qanda_questions": [],\n  "scripture_notes": []\n}'


class TestLoad:

    @pytest.mark.asyncio
    async def test_missing_file_is_initialized_lazily(self, store, data_file):
        document = await store.load()

        assert data_file.exists()
        assert document.qanda_questions == []
        assert document.scripture_notes == []

    @pytest.mark.asyncio
    async def test_reads_existing_records(self, seeded_store):
        document = await seeded_store.load()

        assert document.qanda_questions[0].text == "Who built the ark?"
        assert document.qanda_questions[0].is_read is False
        assert document.scripture_notes[0].verse == "Genesis 1:1"

    @pytest.mark.asyncio
    async def test_missing_and_null_collections_default_to_empty(self, store, data_file):
        data_file.write_text(json.dumps({"qanda_questions": None}))

        document = await store.load()

        assert document.qanda_questions == []
        assert document.scripture_notes == []

    @pytest.mark.asyncio
    async def test_invalid_json_is_corrupt(self, store, data_file):
        data_file.write_text("{not json")

        with pytest.raises(CorruptStoreError):
            await store.load()

        assert data_file.read_text() == "{not json"

    @pytest.mark.asyncio
    async def test_non_object_top_level_is_corrupt(self, store, data_file):
        data_file.write_text("[]")

        with pytest.raises(CorruptStoreError):
            await store.load()

    @pytest.mark.asyncio
    async def test_malformed_record_is_corrupt(self, store, data_file):
        data_file.write_text(json.dumps({"qanda_questions": [{"name": "no id or text"}]}))

        with pytest.raises(CorruptStoreError):
            await store.load()


class TestSaveAndMutate:

    @pytest.mark.asyncio
    async def test_save_rewrites_whole_document(self, seeded_store, data_file):
        document = await seeded_store.load()
        document.qanda_questions.clear()

        await seeded_store.save(document)

        on_disk = json.loads(data_file.read_text())
        assert on_disk["qanda_questions"] == []
        assert len(on_disk["scripture_notes"]) == 1
        assert on_disk["scripture_notes"][0]["createdAt"] == "2023-11-14T22:13:21.000Z"

    @pytest.mark.asyncio
    async def test_save_leaves_no_temporary_files(self, seeded_store, tmp_path):
        await seeded_store.save(await seeded_store.load())

        assert sorted(p.name for p in tmp_path.iterdir()) == ["data.json"]

    @pytest.mark.asyncio
    async def test_unknown_fields_survive_rewrite(self, store, data_file):
        data_file.write_text(json.dumps({
            "qanda_questions": [
                {"id": 1, "name": "A", "text": "Q", "isRead": True, "timestamp": 1, "pinned": True}
            ],
            "scripture_notes": [],
            "settings": {"theme": "dark"},
        }))

        await store.save(await store.load())

        on_disk = json.loads(data_file.read_text())
        assert on_disk["qanda_questions"][0]["pinned"] is True
        assert on_disk["settings"] == {"theme": "dark"}

    @pytest.mark.asyncio
    async def test_mutate_persists_on_clean_exit(self, store, data_file):
        async with store.mutate() as document:
            document.qanda_questions.append(
                Question(id=5, name="Ana", text="Why?", timestamp=5)
            )

        on_disk = json.loads(data_file.read_text())
        assert on_disk["qanda_questions"] == [
            {"id": 5, "name": "Ana", "text": "Why?", "isRead": False, "timestamp": 5}
        ]

    @pytest.mark.asyncio
    async def test_mutate_skips_save_when_block_raises(self, seeded_store, data_file):
        before = data_file.read_text()

        with pytest.raises(RuntimeError):
            async with seeded_store.mutate() as document:
                document.qanda_questions.clear()
                raise RuntimeError("abort")

        assert data_file.read_text() == before

    @pytest.mark.asyncio
    async def test_concurrent_mutations_keep_every_write(self, store):
        async def append(n: int) -> None:
            async with store.mutate() as document:
                document.qanda_questions.append(
                    Question(id=n, name="Anonymous", text=f"q{n}", timestamp=n)
                )

        await asyncio.gather(*(append(n) for n in range(20)))

        document = await store.load()
        assert sorted(q.id for q in document.qanda_questions) == list(range(20))


class TestWriteFaults:

    @pytest.mark.asyncio
    async def test_failed_write_keeps_previous_file(self, seeded_store, data_file, tmp_path):
        before = data_file.read_text()

        with patch("church_api.store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(StoreError) as exc_info:
                async with seeded_store.mutate() as document:
                    document.qanda_questions.clear()

        assert not isinstance(exc_info.value, CorruptStoreError)
        assert data_file.read_text() == before
        assert sorted(p.name for p in tmp_path.iterdir()) == ["data.json"]

    @pytest.mark.asyncio
    async def test_lock_released_after_failed_write(self, seeded_store):
        with patch("church_api.store.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(StoreError):
                async with seeded_store.mutate() as document:
                    document.scripture_notes.clear()

        async with seeded_store.mutate() as document:
            document.scripture_notes.clear()

        assert (await seeded_store.load()).scripture_notes == []

    @pytest.mark.asyncio
    async def test_unreadable_file_is_store_error(self, seeded_store):
        with patch("church_api.store.aiofiles.open", side_effect=PermissionError("denied")):
            with pytest.raises(StoreError) as exc_info:
                await seeded_store.load()

        assert not isinstance(exc_info.value, CorruptStoreError)
