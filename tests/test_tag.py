import pytest

from saaskit.universal.tag import SolidTag, Tag, TagModel, tag_from_model


class RecordingTag(Tag):
    def __init__(self):
        self.received = []

    def model(self):
        return TagModel()

    def update(self, new_model):
        self.received.append(new_model)


class FailingTag(Tag):
    def model(self):
        return TagModel()

    def update(self, new_model):
        raise LookupError("missing")


def test_change_leaves_model_equal():
    model = TagModel()
    model.change(TagModel())
    assert model == TagModel()


def test_solid_tag_forwards_new_model():
    delegate = RecordingTag()
    new = TagModel()
    SolidTag(TagModel(), delegate).update(new)
    assert len(delegate.received) == 1
    assert delegate.received[0] is new


def test_tag_from_model_wraps_same_object():
    model = TagModel()
    tag = tag_from_model(model)
    tag.update(TagModel())
    assert tag.model() is model


def test_delegate_error_propagates():
    with pytest.raises(LookupError):
        SolidTag(TagModel(), FailingTag()).update(TagModel())