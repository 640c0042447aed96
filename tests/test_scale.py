import pytest

from cocktailpro.scale import Observer, Scale, Subject


class _Recorder(Observer):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def update(self):
        self.log.append(self.name)


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()


def test_notify_calls_latest_observer_first():
    log = []
    subject = Subject()
    subject.attach(_Recorder("first", log))
    subject.attach(_Recorder("second", log))
    subject.notify()
    assert log == ["second", "first"]


def test_new_scale_is_empty():
    scale = Scale()
    assert (scale.weight, scale.delta) == (0, 0)


def test_change_weight_adds_to_weight_and_delta():
    scale = Scale()
    scale.change_weight(10)
    scale.change_weight(10)
    assert scale.weight == scale.delta == 20


def test_change_weight_notifies_observers():
    log = []
    scale = Scale()
    scale.attach(_Recorder("watcher", log))
    scale.change_weight(3)
    assert log == ["watcher"]


def test_weight_never_goes_below_zero_but_delta_does():
    scale = Scale()
    scale.change_weight(-5)
    assert scale.weight == 0
    assert scale.delta == -5


def test_change_weight_drops_fraction():
    scale = Scale()
    scale.change_weight(2.7)
    assert scale.weight == 2


def test_tare_resets_delta_only():
    scale = Scale()
    scale.change_weight(40)
    assert scale.tare() == 0
    assert scale.delta == 0
    assert scale.weight == 40