import sys

from pathlib import Path
from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": ["pytest", "pytest-benchmark", "nox", "black", "mypy < 1"],
}

if sys.version_info < (3, 12):
    # There is currently no atheris support for Python 3.12
    extras_require["fuzzing"] = ["atheris"]

setup(
    name="rletext",
    version="0.1.0",
    packages=["rletext"],
    install_requires=[
        "charset-normalizer >= 2.0.0",
    ],
    extras_require=extras_require,
    description="Life pattern RLE to text converter",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    scripts=[
        "tools/rle2txt.py",
    ],
    keywords=[
        "game of life",
        "cellular automaton",
        "rle",
        "run-length encoding",
    ],
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Topic :: Scientific/Engineering :: Artificial Life",
        "Topic :: Text Processing",
    ],
)
