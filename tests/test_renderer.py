from ptsd.game_object import GameObject
from ptsd.renderer import Renderer


class Recording(GameObject):
    def __init__(self, name, z_index, log):
        super().__init__(z_index=z_index)
        self.name = name
        self._log = log

    def draw(self):
        self._log.append(self.name)


def test_draws_in_ascending_z_order():
    log = []
    high = Recording("high", 3, log)
    low = Recording("low", 1, log)
    mid = Recording("mid", 2, log)
    renderer = Renderer([high, low])
    renderer.add_child(mid)
    assert renderer.children == [high, low, mid]
    renderer.update()
    assert log == ["low", "mid", "high"]


def test_children_are_drawn_by_their_own_z_index():
    log = []
    parent = Recording("parent", 5, log)
    child = Recording("child", 0, log)
    grandchild = Recording("grandchild", 10, log)
    child.add_child(grandchild)
    parent.add_child(child)
    renderer = Renderer([parent])
    renderer.update()
    assert renderer.children == [parent]
    assert log == ["child", "parent", "grandchild"]


def test_remove_child_removes_every_occurrence():
    log = []
    a = Recording("a", 0, log)
    b = Recording("b", 1, log)
    renderer = Renderer()
    renderer.add_children([a, b, a])
    renderer.remove_child(a)
    renderer.update()
    assert log == ["b"]
    assert renderer.children == [b]


def test_every_object_drawn_once_per_update():
    log = []
    objects = [Recording(f"o{i}", 0, log) for i in range(4)]
    renderer = Renderer(objects)
    renderer.update()
    assert sorted(log) == sorted(o.name for o in objects)
    renderer.update()
    assert len(log) == 2 * len(objects)


def test_constructor_copies_children():
    log = []
    initial = [Recording("a", 0, log)]
    renderer = Renderer(initial)
    initial.append(Recording("b", 0, log))
    renderer.update()
    assert log == ["a"]