# standard libraries
import logging
import typing

# third party libraries
# None

# local libraries
from nion.tagui import Builder
from nion.tagui import Declarative
from nion.tagui import Handlers
from nion.tagui import Host
from nion.tagui import Library
from nion.tagui import TestUI


# user program below

gui = Library.GuiLibrary("settings_example")


def close_clicked(event: Host.GuiEvent) -> None:
    window = event.element.ui.find_element("settings_window")
    window.visible = False


def verbose_toggled(event: Host.GuiEvent) -> None:
    gui.set_tags(event.element, {"verbose": bool(event.data.get("state"))})


def name_confirmed(event: Host.GuiEvent) -> None:
    logging.info("Name set to %s", event.data.get("text"))


gui.add_handlers({
    "close_clicked": close_clicked,
    "verbose_toggled": verbose_toggled,
    "name_confirmed": name_confirmed,
}, wrapper=Handlers.log_exceptions)


def build(ui: TestUI.UserInterface) -> typing.Tuple[Builder.ElementTable, typing.Optional[Host.ElementLike]]:
    return gui.add(ui.root, Declarative.create_element(
        {"type": "frame", "name": "settings_window", "direction": "vertical"},
        Declarative.create_element(
            {"type": "flow", "name": "titlebar"},
            Declarative.create_element({"type": "label", "caption": "Settings"}),
            Declarative.create_element({"type": "sprite-button", "sprite": "utility/close_white"}, handlers=close_clicked),
            drag_target="settings_window"),
        Declarative.create_element(
            {"type": "tabbed-pane"},
            Declarative.create_tab_pair(
                {"args": {"type": "tab", "caption": "General"}},
                Declarative.create_element(
                    {"type": "flow", "direction": "vertical"},
                    Declarative.create_element({"type": "checkbox", "name": "verbose", "state": False},
                                               handlers={Host.EventType.on_gui_checked_state_changed: verbose_toggled}),
                    Declarative.create_element({"type": "textfield", "name": "player_name"},
                                               handlers={"on_gui_confirmed": name_confirmed}),
                )),
        ),
        style_mods={"minimal_width": 300}))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    ui = TestUI.UserInterface()
    gui.install(ui)
    elems, window = build(ui)
    ui.fire_event(Host.EventType.on_gui_checked_state_changed, elems["verbose"], state=True)
    ui.fire_event(Host.EventType.on_gui_confirmed, elems["player_name"], text="Engineer")
    print(ui.write_json())


if __name__ == "__main__":
    main()
