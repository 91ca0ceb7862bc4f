"""Demo: follow a job through its states by name or by index.

Usage:
    python -m examples.demo
"""

from __future__ import annotations

from state_emitter import StateEmitter, Token, UnknownChannelError

CANCELLED = Token("cancelled")


def main() -> None:
    job = StateEmitter(["queued", "running", "done", CANCELLED])

    job.on("queued", lambda name: print(f"📋 Queued: {name}"))
    job.on(1, lambda name: print(f"⏳ Running: {name}"))
    job.prepend_listener("running", lambda name: print(f"▶️ Starting {name} (index {job.index('running')})"))
    job.once("done", lambda name: print(f"✅ Done: {name}"))
    job.on(CANCELLED, lambda name: print(f"🛑 Cancelled: {name}"))

    for state in range(len(job)):
        job.emit(state, "nightly-build")

    # The once-listener is gone; nothing left to call for "done"
    print(f"Listeners left for done: {job.listener_count('done')}")
    print(f"Emitted done again: {job.emit(2, 'nightly-build')}")

    try:
        job.emit("failed", "nightly-build")
    except UnknownChannelError as e:
        print(f"Refused: {e}")


if __name__ == "__main__":
    main()
