"""Run the API server and the Chainlit chat UI side by side."""

import os
import signal
import subprocess
import sys
from typing import Dict, List, Tuple


def build_commands() -> Tuple[List[list], Dict[str, str]]:
    python = sys.executable
    port = os.getenv("FASTAPI_PORT", "8000")
    env = dict(os.environ)
    env.setdefault("BACKEND_URL", f"http://localhost:{port}")
    commands = [
        [python, "-m", "uvicorn", "farm_connect.api.server:app", "--reload", "--port", port],
        [python, "-m", "chainlit", "run", "chainlit_app.py", "--watch", "--port", "8501"],
    ]
    return commands, env


def stop_all(processes: List[subprocess.Popen]) -> None:
    for proc in processes:
        if proc.poll() is None:
            proc.terminate()
    for proc in processes:
        if proc.poll() is None:
            proc.wait()


def main():
    processes: List[subprocess.Popen] = []

    def on_signal(signum, frame):
        stop_all(processes)
        sys.exit(0)

    signal.signal(signal.SIGINT, on_signal)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, on_signal)

    commands, env = build_commands()
    for cmd in commands:
        print(f"Starting: {' '.join(cmd)}")
        processes.append(subprocess.Popen(cmd, env=env))

    try:
        for proc in processes:
            proc.wait()
    except KeyboardInterrupt:
        pass
    finally:
        stop_all(processes)


if __name__ == "__main__":
    main()
