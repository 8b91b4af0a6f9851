import pytest

from billed.models.draft import DraftState, NewBillDraft
from billed.models.receipt import StagedReceipt


def _staged(**overrides) -> StagedReceipt:
    defaults = dict(key="1234", file_url="https://localhost:3456/images/test.jpg")
    defaults.update(overrides)
    return StagedReceipt(**defaults)


class TestNewBillDraft:
    def test_starts_empty(self):
        draft = NewBillDraft()
        assert draft.state == DraftState.EMPTY
        assert draft.bill_id is None

    def test_stage_file(self):
        draft = NewBillDraft()
        draft.stage_file(_staged(), "image.jpg")
        assert draft.state == DraftState.FILE_STAGED
        assert draft.bill_id == "1234"
        assert draft.file_name == "image.jpg"
        assert draft.file_url == "https://localhost:3456/images/test.jpg"

    def test_store_file_name_wins(self):
        draft = NewBillDraft()
        draft.stage_file(_staged(file_name="stored.jpg"), "image.jpg")
        assert draft.file_name == "stored.jpg"

    def test_restage_replaces_file(self):
        draft = NewBillDraft()
        draft.stage_file(_staged(), "a.jpg")
        draft.stage_file(_staged(key="5678"), "b.jpg")
        assert draft.bill_id == "5678"
        assert draft.file_name == "b.jpg"

    def test_clear_file(self):
        draft = NewBillDraft()
        draft.stage_file(_staged(), "image.jpg")
        draft.clear_file()
        assert draft.state == DraftState.EMPTY
        assert draft.file_url is None

    def test_submit_from_empty_rejected(self):
        with pytest.raises(ValueError, match="No receipt"):
            NewBillDraft().mark_submitted()

    def test_submit(self):
        draft = NewBillDraft()
        draft.stage_file(_staged(), "image.jpg")
        assert draft.require_staged() == "1234"
        draft.mark_submitted()
        assert draft.state == DraftState.SUBMITTED

    def test_no_transition_after_submit(self):
        draft = NewBillDraft()
        draft.stage_file(_staged(), "image.jpg")
        draft.mark_submitted()
        with pytest.raises(ValueError, match="already submitted"):
            draft.mark_submitted()
        with pytest.raises(ValueError, match="already submitted"):
            draft.stage_file(_staged(), "image.jpg")
        with pytest.raises(ValueError, match="already submitted"):
            draft.clear_file()
