import pytest

from saaskit.universal.description import (
    Description,
    DescriptionModel,
    SolidDescription,
    description_from_model,
    empty_description_model,
)


class RecordingDescription(Description):
    def __init__(self, fail=False):
        self.received = []
        self.fail = fail

    def model(self):
        return DescriptionModel()

    def update(self, new_model):
        if self.fail:
            raise ValueError("rejected")
        self.received.append(new_model)


def test_empty_description_model():
    assert empty_description_model() == DescriptionModel(value="", image_url="")


def test_change_copies_fields():
    model = DescriptionModel(value="a", image_url="b")
    new = DescriptionModel(value="text", image_url="https://img.example.com/1.png")
    model.change(new)
    assert model == new
    assert model is not new


def test_solid_without_delegate_updates_model():
    model = empty_description_model()
    desc = description_from_model(model)
    desc.update(DescriptionModel(value="v", image_url="u"))
    assert desc.model() is model
    assert model == DescriptionModel(value="v", image_url="u")


def test_solid_forwards_new_model_to_delegate():
    delegate = RecordingDescription()
    new = DescriptionModel(value="v", image_url="u")
    SolidDescription(DescriptionModel(), delegate).update(new)
    assert len(delegate.received) == 1
    assert delegate.received[0] is new


def test_delegate_error_propagates():
    model = DescriptionModel()
    desc = SolidDescription(model, RecordingDescription(fail=True))
    with pytest.raises(ValueError):
        desc.update(DescriptionModel(value="kept"))
    assert model.value == "kept"


def test_description_is_abstract():
    with pytest.raises(TypeError):
        Description()