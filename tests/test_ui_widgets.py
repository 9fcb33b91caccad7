from gamekit.colors import WHITE
from gamekit.ui_element import UIElement, UIInteractor, UIRenderer
from gamekit.ui_widgets import ButtonState, UIButton, UIImage, UIPanel, UIText
from gamekit.vector2 import Vector2


class TagRenderer(UIRenderer):
    def __init__(self, tag):
        self.tag = tag

    def draw(self, owner):
        return self.tag


class CountingInteractor(UIInteractor):
    def __init__(self):
        self.count = 0

    def update_interaction(self, owner):
        self.count += 1


def tagged(tag, z=0):
    element = UIElement()
    element.renderer = TagRenderer(tag)
    element.z_order = z
    return element


def test_add_child_ignores_none():
    panel = UIPanel()
    child = UIElement()
    panel.add_child(None)
    panel.add_child(child)
    assert panel.children == (child,)


def test_panel_draws_children_in_z_order():
    panel = UIPanel()
    panel.add_child(tagged("c", 3))
    panel.add_child(tagged("a", 1))
    panel.add_child(tagged("b", 2))
    assert panel.draw() == ["a", "b", "c"]
    assert [c.z_order for c in panel.children] == [1, 2, 3]


def test_panel_draws_itself_first():
    panel = UIPanel()
    panel.renderer = TagRenderer("panel")
    panel.add_child(tagged("child"))
    assert panel.draw() == ["panel", "child"]


def test_hidden_panel_draws_nothing():
    panel = UIPanel()
    panel.add_child(tagged("child"))
    panel.set_visible(False)
    assert panel.draw() == []


def test_set_visible_propagates_to_children():
    panel = UIPanel()
    inner = UIPanel()
    leaf = UIElement()
    inner.add_child(leaf)
    panel.add_child(inner)
    panel.set_visible(False)
    assert (panel.visible, inner.visible, leaf.visible) == (False, False, False)
    panel.set_visible(True)
    assert leaf.visible is True


def test_panel_update_interaction_reaches_children():
    panel = UIPanel()
    own = CountingInteractor()
    panel.interactor = own
    child = UIElement()
    child_interactor = CountingInteractor()
    child.interactor = child_interactor
    panel.add_child(child)
    panel.update_interaction()
    assert (own.count, child_interactor.count) == (1, 1)
    panel.set_visible(False)
    panel.update_interaction()
    assert (own.count, child_interactor.count) == (1, 1)


def test_hidden_panel_skips_logic():
    from gamekit.ui_element import UIAnimator

    class Counter(UIAnimator):
        def __init__(self):
            self.count = 0

        def update(self, owner, transform, delta_time):
            self.count += 1

    panel = UIPanel()
    child = UIElement()
    counter = Counter()
    child.animator = counter
    panel.add_child(child)
    panel.update_logic(0.1)
    assert counter.count == 1
    panel.set_visible(False)
    panel.update_logic(0.1)
    assert counter.count == 1


def test_button_click_callback():
    clicks = []
    button = UIButton("normal.png", "hover.png")
    button.set_on_click(lambda: clicks.append(button.state))
    button.invoke_on_click()
    button.invoke_on_click()
    assert clicks == [ButtonState.NORMAL, ButtonState.NORMAL]


def test_button_without_callback_keeps_state():
    button = UIButton("normal.png")
    button.invoke_on_click()
    assert button.state is ButtonState.NORMAL


def test_button_draws_sprite_for_state():
    button = UIButton("normal.png", "hover.png", "pressed.png")
    assert button.draw()[0].path == "normal.png"
    button.state = ButtonState.HOVERED
    assert button.draw()[0].path == "hover.png"
    button.state = ButtonState.PRESSED
    assert button.draw()[0].path == "pressed.png"


def test_button_falls_back_to_normal_sprite():
    button = UIButton("normal.png")
    button.state = ButtonState.PRESSED
    assert button.draw()[0].path == "normal.png"


def test_button_bounding_size_from_renderer():
    button = UIButton("normal.png")
    assert button.bounding_size() == Vector2(0.0, 0.0)
    button.renderer.normal_size = Vector2(64.0, 32.0)
    assert button.bounding_size() == Vector2(64.0, 32.0)
    button.renderer = None
    assert button.bounding_size() == Vector2(0.0, 0.0)


def test_text_defaults():
    text = UIText()
    assert (text.text, text.color, text.font_size) == ("", WHITE, 20)
    assert text.has_renderer() is True


def test_text_draw_reports_current_state():
    text = UIText("hello", 0xFF00FF00, 32)
    text.transform.position = Vector2(10.0, 5.0)
    text.text = "bye"
    (command,) = text.draw()
    assert command.text == "bye"
    assert command.position == Vector2(10.0, 5.0)
    assert command.color == 0xFF00FF00
    assert command.font_size == 32


def test_image_draw_uses_path_and_transform():
    image = UIImage("logo.png")
    image.transform.scale = Vector2(0.7, 0.7)
    (command,) = image.draw()
    assert command.path == "logo.png"
    assert command.transform.scale == Vector2(0.7, 0.7)
    assert image.has_renderer() is True