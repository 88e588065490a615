# standard libraries
import typing
import unittest

# third party libraries
# None

# local libraries
from nion.tagui import Builder
from nion.tagui import Declarative
from nion.tagui import Handlers
from nion.tagui import Host
from nion.tagui import Library
from nion.tagui import TestUI


class Counter:

    def __init__(self) -> None:
        self.count = 0
        self.texts: typing.List[str] = list()

    def increment(self, event: Host.GuiEvent) -> None:
        self.count += 1

    def text_changed(self, event: Host.GuiEvent) -> None:
        self.texts.append(event.data.get("text"))


class TestGuiLibraryClass(unittest.TestCase):

    def setUp(self) -> None:
        self.ui = TestUI.UserInterface()
        self.counter = Counter()
        self.gui = Library.GuiLibrary("library_test")
        self.gui.add_handlers({"increment": self.counter.increment, "text_changed": self.counter.text_changed})
        self.gui.install(self.ui)

    def tearDown(self) -> None:
        self.gui.uninstall(self.ui)

    def build(self) -> typing.Tuple[Builder.ElementTable, typing.Optional[Host.ElementLike]]:
        return self.gui.add(self.ui.root, Declarative.create_element(
            {"type": "frame", "name": "window", "caption": "Counter"},
            Declarative.create_element({"type": "flow", "name": "titlebar"}, drag_target="window"),
            Declarative.create_element({"type": "button", "name": "plus", "caption": "+"}, handlers=self.counter.increment),
            Declarative.create_element({"type": "textfield", "name": "note"},
                                       handlers={Host.EventType.on_gui_text_changed: self.counter.text_changed}),
            style_mods={"minimal_width": 200}))

    def test_clicks_reach_handler(self) -> None:
        elems, window = self.build()
        self.ui.fire_event(Host.EventType.on_gui_click, elems["plus"])
        self.ui.fire_event(Host.EventType.on_gui_click, elems["plus"])
        self.ui.fire_event(Host.EventType.on_gui_click, elems["note"])
        self.ui.fire_event(Host.EventType.on_gui_text_changed, elems["note"], text="hello")
        self.assertEqual(2, self.counter.count)
        self.assertEqual(["hello"], self.counter.texts)
        self.assertIs(elems["window"], window)
        self.assertIs(window, elems["titlebar"].drag_target)
        self.assertEqual(200, window.style.minimal_width)

    def test_handlers_survive_restart(self) -> None:
        elems, window = self.build()
        saved = self.ui.write_json()
        # a new process: new host state, new library, handlers registered again under the same names
        restored_ui = TestUI.UserInterface.from_json(saved)
        restored_counter = Counter()
        restored_gui = Library.GuiLibrary("library_test")
        restored_gui.add_handlers({"increment": restored_counter.increment})
        restored_gui.install(restored_ui)
        restored_ui.fire_event(Host.EventType.on_gui_click, restored_ui.find_element("plus"))
        # text_changed was not registered again; the stale binding is ignored
        event = Host.GuiEvent(Host.EventType.on_gui_text_changed, restored_ui.find_element("note"))
        self.assertFalse(restored_gui.dispatch(event))
        self.assertEqual(1, restored_counter.count)
        self.assertEqual(0, self.counter.count)
        restored_gui.uninstall(restored_ui)

    def test_set_tags_keeps_handler_binding(self) -> None:
        elems, window = self.build()
        self.gui.set_tags(elems["plus"], {"amount": 5})
        self.assertEqual(5, elems["plus"].tags["amount"])
        self.assertTrue(self.gui.dispatch(Host.GuiEvent(Host.EventType.on_gui_click, elems["plus"])))

    def test_set_handlers_rebinds_element(self) -> None:
        elems, window = self.build()
        label = elems["window"].add({"type": "label", "tags": {"row": 1}})
        self.assertFalse(self.gui.dispatch(Host.GuiEvent(Host.EventType.on_gui_click, label)))
        self.gui.set_handlers(label, {"on_gui_click": "increment"})
        self.assertTrue(self.gui.dispatch(Host.GuiEvent(Host.EventType.on_gui_click, label)))
        self.assertEqual(1, self.counter.count)
        self.gui.set_handlers(label, None)
        self.assertFalse(self.gui.dispatch(Host.GuiEvent(Host.EventType.on_gui_click, label)))
        self.assertEqual({"row": 1}, label.tags)

    def test_libraries_with_different_namespaces_are_independent(self) -> None:
        other_events = list()
        other_gui = Library.GuiLibrary("other")
        other_gui.add_handlers({"increment": other_events.append})
        other_gui.install(self.ui)
        elems, window = self.build()
        self.ui.fire_event(Host.EventType.on_gui_click, elems["plus"])
        other_gui.uninstall(self.ui)
        self.assertEqual(1, self.counter.count)
        self.assertEqual(list(), other_events)

    def test_strict_names(self) -> None:
        strict_gui = Library.GuiLibrary("strict", strict_names=True)
        defs = [{"args": {"type": "label", "name": "a"}}, {"args": {"type": "label", "name": "a"}}]
        with self.assertRaises(Builder.DuplicateElementNameError):
            strict_gui.add(self.ui.root, defs)

    def test_wrapped_handlers_contain_errors(self) -> None:
        def broken(event: Host.GuiEvent) -> None:
            raise ValueError("broken")

        self.gui.add_handlers({"broken": broken}, wrapper=Handlers.log_exceptions)
        elems, button = self.gui.add(self.ui.root, {"args": {"type": "button"}, "handlers": broken})
        with self.assertLogs(level="ERROR"):
            self.assertTrue(self.gui.dispatch(Host.GuiEvent(Host.EventType.on_gui_click, button)))


if __name__ == '__main__':
    unittest.main()
