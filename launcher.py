import subprocess
from dataclasses import dataclass

from constants import FULLSCREEN_FLAG, INTERPRETER, KEYBOARD_FLAG


@dataclass(frozen=True)
class LaunchRequest:
    path: str
    use_keyboard: bool = False
    use_fullscreen: bool = False


def build_command(request: LaunchRequest, executable: str = INTERPRETER) -> list[str]:
    """Return the interpreter argv: executable, [-k], [-F], game path."""
    argv = [executable]
    if request.use_keyboard:
        argv.append(KEYBOARD_FLAG)
    if request.use_fullscreen:
        argv.append(FULLSCREEN_FLAG)
    argv.append(request.path)
    return argv


def format_command(argv: list[str]) -> str:
    # Display only; the path is not escaped, so embedded quotes print as-is
    *head, path = argv
    return " ".join(head + [f'"{path}"'])


def launch(request: LaunchRequest, executable: str = INTERPRETER) -> int:
    """Run the interpreter on the requested game and wait for it to exit."""
    argv = build_command(request, executable)
    print(f"Launching: {format_command(argv)}")
    try:
        return subprocess.call(argv)
    except OSError as e:
        print(f"Could not start '{executable}': {e}")
        return 127
