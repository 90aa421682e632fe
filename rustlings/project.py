"""Generation of rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        data = {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self) -> None:
        """Write rust-project.json into the current directory."""
        Path("./rust-project.json").write_text(self.to_json(), encoding="utf-8")

    def add_path(self, path: os.PathLike | str) -> None:
        """Add a crate for ``path`` if it has the .rs extension."""
        path = Path(path)
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self) -> None:
        """Add a crate for every .rs file below ./exercises."""
        for path in sorted(Path("exercises").glob("**/*")):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        completed = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        text = completed.stdout.decode("utf-8", errors="replace")
        parts = text.split()
        toolchain = parts[0] if parts else text

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = os.path.join(
            toolchain, "lib", "rustlib", "src", "rust", "library"
        )