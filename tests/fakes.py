"""Test doubles shared across test modules."""

import subprocess


class FakeSystem:
    """Stand-in for subprocess.run and shutil.which.

    Responses are keyed by command prefix; the longest matching prefix
    wins. Unknown commands succeed with empty output. Every call is
    recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], tuple[int, str, str]] = {}
        self.calls: list[list[str]] = []
        self.missing: set[str] = set()

    def respond(
        self,
        prefix: list[str],
        stdout: str = "",
        returncode: int = 0,
        stderr: str = "",
    ) -> None:
        self.responses[tuple(prefix)] = (returncode, stdout, stderr)

    def which(self, name: str) -> str | None:
        if name in self.missing:
            return None
        return f"/usr/bin/{name}"

    def run(self, args: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(args))
        if args and args[0] in self.missing:
            raise FileNotFoundError(args[0])

        best: tuple[str, ...] | None = None
        for prefix in self.responses:
            if tuple(args[: len(prefix)]) == prefix and (best is None or len(prefix) > len(best)):
                best = prefix

        if best is None:
            return subprocess.CompletedProcess(args, 0, stdout="", stderr="")
        returncode, stdout, stderr = self.responses[best]
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)

    def called(self, prefix: list[str]) -> list[list[str]]:
        """Return recorded calls starting with ``prefix``."""
        return [c for c in self.calls if c[: len(prefix)] == prefix]
