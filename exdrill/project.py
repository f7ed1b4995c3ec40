"""Build the rust-project.json file that rust-analyzer reads."""

import json
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path):
        """Add a crate for ``path`` if it has the .rs extension."""
        path = str(path)
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root="./exercises"):
        """Add a crate for every .rs file below ``root``."""
        for path in sorted(Path(root).glob("**/*")):
            self.add_path(path)

    def get_sysroot_src(self):
        """Ask rustc for the toolchain and set the library source path."""
        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = result.stdout.decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def to_json(self):
        return json.dumps(
            {"sysroot_src": self.sysroot_src, "crates": [asdict(c) for c in self.crates]},
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def write_to_disk(self, path="./rust-project.json"):
        Path(path).write_text(self.to_json(), encoding="utf-8")