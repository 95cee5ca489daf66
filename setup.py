from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="decxor",
    version="1.0.0",
    packages=find_packages(include=["decxor", "decxor.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    description="Batch file obfuscation with an arbitrary-length decimal key",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
