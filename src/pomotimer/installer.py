"""Install the ``pomotimer`` command into ``~/.local/bin`` and onto PATH."""
from __future__ import annotations

import logging
import os
import shutil
import sysconfig
from pathlib import Path
from typing import Mapping, Optional, Tuple

from . import notifier, prompts

logger = logging.getLogger(__name__)

SCRIPT_NAME = "pomotimer"
PROFILE_MARKER = "# Added by pomotimer installer"
POSIX_PATH_LINE = 'export PATH="$HOME/.local/bin:$PATH"'
FISH_PATH_LINE = "set -x PATH $HOME/.local/bin $PATH"

SHELL_PROFILES = {
    "bash": (".bashrc",),
    "zsh": (".zshrc",),
    "fish": (".config", "fish", "config.fish"),
}


def find_script() -> Optional[Path]:
    found = shutil.which(SCRIPT_NAME)
    if found:
        return Path(found)
    candidate = Path(sysconfig.get_path("scripts")) / SCRIPT_NAME
    return candidate if candidate.is_file() else None


def install_assets(target_dir: Path) -> Path:
    """Put an alert sound next to the installed command.

    The first bundled asset found is copied; otherwise a generated beep is written.
    """
    dest = target_dir / "assets" / notifier.ALERT_FILE
    dest.parent.mkdir(parents=True, exist_ok=True)
    source = notifier.find_sound_asset(notifier.sound_candidates()[:2])
    if source is not None:
        shutil.copyfile(source, dest)
        print(f"✅ Copied sound file from {source} to {dest}")
    else:
        dest.write_bytes(notifier.generate_beep(duration_s=0.6, volume=0.6))
        print(f"✅ Wrote a generated alert beep to {dest}")
    return dest


def is_on_path(directory: Path, path_env: str) -> bool:
    entries = [Path(entry).expanduser() for entry in path_env.split(os.pathsep) if entry]
    return directory in entries


def detect_profile(shell: str, home: Path) -> Optional[Tuple[str, Path]]:
    """Map ``$SHELL`` to its name and profile file, or ``None`` when unknown."""
    name = Path(shell).name if shell else ""
    parts = SHELL_PROFILES.get(name)
    if parts is None:
        return None
    return name, home.joinpath(*parts)


def path_line(shell_name: str) -> str:
    return FISH_PATH_LINE if shell_name == "fish" else POSIX_PATH_LINE


def update_profile(profile: Path, shell_name: str) -> None:
    line = path_line(shell_name)
    if profile.exists():
        with profile.open("a", encoding="utf-8") as handle:
            handle.write(f"\n{PROFILE_MARKER}\n{line}\n")
    else:
        profile.parent.mkdir(parents=True, exist_ok=True)
        profile.write_text(f"{PROFILE_MARKER}\n{line}\n", encoding="utf-8")


def _manual_instructions(target_dir: Path, line: str = POSIX_PATH_LINE) -> None:
    print(f"\nYou'll need to manually add {target_dir} to your PATH.")
    print("Add this line to your shell profile:")
    print(f"  {line}")


def install_to_path(
    *,
    home: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Copy the command to ``~/.local/bin`` and offer to extend PATH.

    Returns ``True`` once the command is installed, whatever happens to the
    shell profile afterwards.
    """
    env = os.environ if environ is None else environ
    print(f"🍅 Let's install {SCRIPT_NAME} to your PATH!")

    script = find_script()
    if script is None:
        print(f"❌ Could not find the installed '{SCRIPT_NAME}' command. Run 'pip install .' first.")
        return False

    try:
        home = home or Path.home()
    except RuntimeError:
        print("❌ Could not determine your home directory")
        return False

    target_dir = home / ".local" / "bin"
    dest = target_dir / SCRIPT_NAME
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        if script.resolve() != dest.resolve():
            print(f"Copying from {script} to {dest}")
            shutil.copy2(script, dest)
        if os.name == "posix":
            dest.chmod(0o755)
    except OSError as exc:
        print(f"❌ Failed to install {SCRIPT_NAME}: {exc}")
        return False

    try:
        install_assets(target_dir)
    except OSError as exc:
        print(f"⚠️ Warning: Failed to install the alert sound: {exc}")

    print("\n✅ Installation successful! 🍅")
    print(f"Command installed to: {dest}")

    if is_on_path(target_dir, env.get("PATH", "")):
        print(f"\nGood news! {target_dir} is already in your PATH.")
        print(f"You can run the command '{SCRIPT_NAME}' from anywhere!")
        return True

    if not prompts.confirm("Would you like to add the installation directory to your PATH?"):
        _manual_instructions(target_dir)
        return True

    detected = detect_profile(env.get("SHELL", ""), home)
    if detected is None:
        print("\nCould not detect your shell profile file.")
        _manual_instructions(target_dir)
        return True

    shell_name, profile = detected
    print(f"\nDetected shell: {shell_name}")
    print(f"Will add PATH entry to: {profile}")
    if not prompts.confirm(f"Proceed to modify {profile}?"):
        print("\nNo changes made to your shell profile.")
        _manual_instructions(target_dir, path_line(shell_name))
        return True

    try:
        update_profile(profile, shell_name)
    except OSError as exc:
        logger.debug("Profile update failed", exc_info=True)
        print(f"\n❌ Failed to update your shell profile: {exc}")
        print(f"Please manually add the following line to {profile}:")
        print(f"  {path_line(shell_name)}")
        return True

    print("\n✅ Successfully updated your shell profile!")
    print("To apply the changes immediately, run:")
    print(f"  source {profile}")
    print("\nOr simply restart your terminal.")
    return True
