"""Send the program name from a parent to a forked child through a pipe."""

from __future__ import annotations

import os
import sys

_BUFFER_SIZE = 8192


def main(argv: list[str] | None = None) -> int:
    """Fork, write argv[0] into a pipe in the parent and print it from the child."""
    args = list(sys.argv if argv is None else argv)
    name = args[0] if args else ""
    print(f"hello from child {os.getpid()} get {name}")
    print(f"num of arg {len(args)}", end="")
    sys.stdout.flush()

    read_fd, write_fd = os.pipe()
    pid = os.fork()
    if pid == 0:
        os.close(write_fd)
        try:
            data = os.read(read_fd, _BUFFER_SIZE)
        except OSError as exc:
            print(f"read error: {exc}", file=sys.stderr)
            sys.stderr.flush()
            os._exit(1)
        message = data.split(b"\0", 1)[0].decode(errors="replace")
        print("i am in child")
        print(f"the message is reached from the pipe is {message}")
        sys.stdout.flush()
        os._exit(0)

    os.close(read_fd)
    try:
        os.write(write_fd, name.encode() + b"\0")
        print("message sent")
    except OSError as exc:
        print(f"write error: {exc}", file=sys.stderr)
    finally:
        os.close(write_fd)
    sys.stdout.flush()
    os.waitpid(pid, 0)
    return 0


if __name__ == "__main__":
    sys.exit(main())