import pytest

from csopesy.commands import CommandType
from csopesy.consoles import (
    BANNER,
    HINT_INITIALIZED,
    HINT_UNINITIALIZED,
    NOT_INITIALIZED,
    PROMPT,
    BaseScreen,
    Console,
    ConsoleError,
    MainConsole,
    clear_screen,
)
from csopesy.screen import ScreenCommandError


class FakeManager:
    def __init__(self, fail_switch=False):
        self.exited = False
        self.switched = []
        self.fail_switch = fail_switch

    def exit_application(self):
        self.exited = True

    def switch_to_screen(self, screen_name):
        if self.fail_switch:
            raise ConsoleError(f"Screen name '{screen_name}' not found.")
        self.switched.append(screen_name)


def test_console_is_abstract():
    with pytest.raises(TypeError):
        Console("x")


def test_clear_screen_writes_escape(capsys):
    clear_screen()
    assert "\033[2J" in capsys.readouterr().out


@pytest.mark.parametrize(
    "line, expected",
    [
        ("exit", "exit"),
        ("clear", "clear"),
        ("screen -r alpha", "screenR"),
        ("screen -s alpha", "screenS"),
        ("screen -ls", "screenLS"),
        ("scheduler-test", "scheduler-test"),
        ("report-util", "report-util"),
        ("screen -r", "screen"),
        ("", ""),
    ],
)
def test_handle_input_messages(line, expected):
    console = MainConsole()
    assert console.handle_input(line) == expected
    assert console.command_message == expected


def test_handle_input_records_screen_name():
    console = MainConsole()
    console.handle_input("screen -s alpha")
    assert console.screen_name == "alpha"


def test_initialize_sets_flag():
    console = MainConsole()
    assert console.initialized is False
    console.handle_input("initialize")
    assert console.initialized is True


def test_process_reads_with_prompt():
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        return "clear"

    console = MainConsole(input_fn=reader)
    console.process()
    assert prompts == [PROMPT]
    assert console.command_message == "clear"


def test_process_end_of_input_means_exit():
    def reader(prompt):
        raise EOFError

    console = MainConsole(input_fn=reader)
    console.process()
    assert console.command_message == "exit"


def test_header_hint_depends_on_initialization(capsys):
    console = MainConsole()
    console.print_header()
    out = capsys.readouterr().out
    assert BANNER[0] in out
    assert HINT_UNINITIALIZED in out
    console.initialized = True
    console.print_header()
    assert HINT_INITIALIZED in capsys.readouterr().out


def test_display_uninitialized_warns(capsys):
    console = MainConsole(manager=FakeManager())
    console.handle_input("clear")
    console.display()
    assert NOT_INITIALIZED in capsys.readouterr().out


def test_display_exit_uninitialized_exits():
    manager = FakeManager()
    console = MainConsole(manager=manager)
    console.handle_input("exit")
    console.display()
    assert manager.exited is True
    assert console.command_message == ""


def test_display_exit_without_manager_raises():
    console = MainConsole()
    console.handle_input("exit")
    with pytest.raises(ConsoleError):
        console.display()


def test_display_screen_r_switches():
    manager = FakeManager()
    console = MainConsole(manager=manager)
    console.handle_input("initialize")
    console.display()
    console.handle_input("screen -r alpha")
    console.display()
    assert manager.switched == ["alpha"]
    assert console.command_message == ""


def test_display_screen_r_missing_reports(capsys):
    console = MainConsole(manager=FakeManager(fail_switch=True))
    console.initialized = True
    console.handle_input("screen -r ghost")
    console.display()
    assert "ghost" in capsys.readouterr().err


def test_display_unknown_command(capsys):
    console = MainConsole(manager=FakeManager())
    console.initialized = True
    console.handle_input("unknown-command")
    console.display()
    assert "Unknown command. Please try again." in capsys.readouterr().out


def test_display_report_util(capsys):
    console = MainConsole(manager=FakeManager())
    console.initialized = True
    console.handle_input("report-util")
    console.display()
    assert "report-util command recognized" in capsys.readouterr().out
    assert console.command_message == "report-util"


def test_display_clear_reprints_header(capsys):
    console = MainConsole(manager=FakeManager())
    console.initialized = True
    console.handle_input("clear")
    console.display()
    assert HINT_INITIALIZED in capsys.readouterr().out
    assert console.command_message == ""


def test_process_screen_create(capsys):
    MainConsole().process_screen("-s", "alpha")
    assert "MAKE A PROCESS HERE" in capsys.readouterr().out


@pytest.mark.parametrize(
    "option, name",
    [("-s", ""), ("-r", ""), ("-r", "alpha"), ("-x", "alpha")],
)
def test_process_screen_errors(option, name):
    with pytest.raises(ScreenCommandError):
        MainConsole().process_screen(option, name)


def test_base_screen_fresh_process_is_finished(capsys):
    screen = BaseScreen("worker")
    assert screen.name == "worker"
    assert screen.attached_process.pid == 0
    screen.print_process_info()
    out = capsys.readouterr().out
    assert "Process: worker" in out
    assert "Finished!" in out


def test_base_screen_shows_progress(capsys):
    screen = BaseScreen("worker")
    screen.attached_process.add_command(CommandType.PRINT)
    screen.attached_process.add_command(CommandType.PRINT)
    screen.on_enabled()
    out = capsys.readouterr().out
    assert "Current instruction line: 0" in out
    assert "Lines of code: 2" in out
    assert "Finished!" not in out