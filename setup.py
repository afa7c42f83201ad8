from pathlib import Path
import re

from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "sittervendor" / "__init__.py"
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", init.read_text(encoding="utf-8"), re.M)
    if not match:
        raise RuntimeError("__version__ not found in src/sittervendor/__init__.py")
    return match.group(1)


setup(
    name="sittervendor",
    version=_read_version(),
    description="Vendoring, patching and tagging of tree-sitter engine and grammar sources",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "packaging>=21.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "sittervendor=sittervendor.cli:main",
        ],
    },
)
