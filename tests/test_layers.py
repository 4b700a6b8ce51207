from nirsviz.layers import Layer, LayerStack


class RecordingLayer(Layer):
    def __init__(self, name, journal):
        super().__init__(name)
        self.journal = journal

    def on_attach(self):
        self.journal.append(("attach", self.name))

    def on_detach(self):
        self.journal.append(("detach", self.name))


def test_layer_keeps_name():
    assert Layer("Probe").name == "Probe"
    assert Layer().name == "Layer"


def test_overlays_stay_above_layers():
    journal = []
    stack = LayerStack()
    a = RecordingLayer("a", journal)
    overlay = RecordingLayer("ui", journal)
    b = RecordingLayer("b", journal)
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.push_layer(b)
    assert list(stack) == [a, b, overlay]
    assert list(reversed(stack)) == [overlay, b, a]
    assert len(stack) == 3
    assert journal == [("attach", "a"), ("attach", "ui"), ("attach", "b")]


def test_pop_layer_detaches_and_keeps_order():
    journal = []
    stack = LayerStack()
    a = RecordingLayer("a", journal)
    b = RecordingLayer("b", journal)
    overlay = RecordingLayer("ui", journal)
    stack.push_layer(a)
    stack.push_layer(b)
    stack.push_overlay(overlay)
    stack.pop_layer(a)
    assert list(stack) == [b, overlay]
    assert journal[-1] == ("detach", "a")
    c = RecordingLayer("c", journal)
    stack.push_layer(c)
    assert list(stack) == [b, c, overlay]


def test_pop_layer_ignores_overlays_and_unknown():
    journal = []
    stack = LayerStack()
    a = RecordingLayer("a", journal)
    overlay = RecordingLayer("ui", journal)
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.pop_layer(overlay)
    stack.pop_layer(RecordingLayer("ghost", journal))
    assert list(stack) == [a, overlay]
    assert ("detach", "ui") not in journal


def test_pop_overlay_ignores_regular_layers():
    journal = []
    stack = LayerStack()
    a = RecordingLayer("a", journal)
    overlay = RecordingLayer("ui", journal)
    stack.push_layer(a)
    stack.push_overlay(overlay)
    stack.pop_overlay(a)
    assert list(stack) == [a, overlay]
    stack.pop_overlay(overlay)
    assert list(stack) == [a]
    assert journal[-1] == ("detach", "ui")


def test_clear_detaches_everything():
    journal = []
    stack = LayerStack()
    stack.push_layer(RecordingLayer("a", journal))
    stack.push_overlay(RecordingLayer("ui", journal))
    stack.clear()
    assert len(stack) == 0
    assert journal[-2:] == [("detach", "a"), ("detach", "ui")]
    late = RecordingLayer("late", journal)
    stack.push_layer(late)
    assert list(stack) == [late]