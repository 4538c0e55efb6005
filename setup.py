from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "rcat" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ tidak ditemukan di src/rcat/__init__.py")


setup(
    name="rcat",
    version=_read_version(),
    description="Alternatif 'cat' modern dengan pewarnaan sintaks di terminal",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["Pygments>=2.15"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["rcat = rcat.cli:main"]},
)
