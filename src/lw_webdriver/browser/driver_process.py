"""Driver executable launch and teardown."""

import os
import time
import subprocess
from typing import Optional

import psutil

from ..config.paths import driver_executable_path
from ..enums import Browser

import logging
logger = logging.getLogger(__name__)


def can_spawn_driver() -> bool:
    """Drivers are only spawned on the unix family; elsewhere they must be started manually."""
    return os.name == "posix"


def build_driver_command(browser: Browser, config: dict) -> list[str]:
    """
    Build the command line of the driver serving ``browser``.

    The driver is pinned to the configured port so the client's fixed base URL reaches it.
    """
    return [
        driver_executable_path(browser, config),
        f"--port={config['port']}",
    ]


def launch_driver_process(cmd: list[str], grace_secs: float) -> subprocess.Popen:
    """
    Launch a driver process and give it time to start accepting connections.

    Args:
        cmd: Command-line arguments for the driver
        grace_secs: Fixed wait after spawning

    Returns:
        subprocess.Popen: driver process

    Raises:
        OSError: the executable could not be started

    Note:
        Does not raise if the process exits immediately; caller should check proc.poll()
    """
    logger.info(f"Launching {cmd[0]}...")
    proc = subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
    )

    if not wait_for_process_stable(proc, grace_secs):
        logger.error(f"{cmd[0]} exited right after launch. Exit code: {proc.returncode}")

    return proc


def wait_for_process_stable(proc: subprocess.Popen, timeout: float = 2.0) -> bool:
    """
    Wait for process to stabilize and check if it's still running.

    Returns:
        bool: True if process is running, False if it exited
    """
    time.sleep(timeout)
    return proc.poll() is None


def terminate_driver_process(proc: Optional[subprocess.Popen], timeout: float = 3.0) -> bool:
    """
    Kill a spawned driver and the browser processes it started.

    Failures are logged, never raised: this runs during teardown.

    Returns:
        bool: True if the process is gone afterwards
    """
    if proc is None:
        return True

    logger.warning(f"Killing webdriver process {proc.pid} (may fail silently)")
    try:
        parent = psutil.Process(proc.pid)
        children = parent.children(recursive=True)
    except psutil.NoSuchProcess:
        proc.poll()
        return True
    except psutil.AccessDenied as e:
        logger.warning(f"Could not inspect webdriver process {proc.pid}: {e}")
        children = []

    for child in children:
        try:
            child.kill()
        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logger.warning(f"Could not kill child process {child.pid}: {e}")

    try:
        proc.kill()
        proc.wait(timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning(f"Could not kill webdriver process {proc.pid}: {e}")
        return False
    return True


__all__ = [
    'can_spawn_driver',
    'build_driver_command',
    'launch_driver_process',
    'wait_for_process_stable',
    'terminate_driver_process',
]
