import os
import re
from setuptools import setup, find_packages

__lib_name__ = "faststring"

this_directory = os.path.abspath(os.path.dirname(__file__))

# The package itself is the only place the version is written down
with open(os.path.join(this_directory, "faststring", "__init__.py"), "r", encoding="utf-8") as f:
    __version__ = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE).group(1)

with open(os.path.join(this_directory, "README.md"), "r", encoding="utf-8") as f:
    long_description = f.read()

entry_points = {
    "console_scripts": [
        "fs_find=cli.find:main",
        "fs_split=cli.split:main",
        "fs_wc=cli.wc:main",
    ],
}

extras_require = {
    "test": ["pytest", "pytest-repeat", "numpy"],
    "bench": ["fire", "tqdm"],
}


setup(
    name=__lib_name__,
    version=__version__,
    description="Byte-exact strings with predictable search, prefix, suffix, and equality checks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Natural Language :: English",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Operating System :: OS Independent",
        "Topic :: Text Processing :: General",
        "Topic :: Text Processing :: Indexing",
    ],
    python_requires=">=3.8",
    packages=find_packages(include=["faststring", "faststring.*", "cli"]),
    extras_require=extras_require,
    entry_points=entry_points,
)
