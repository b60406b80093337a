import re
from pathlib import Path

from setuptools import setup

install_requires = [
    "httpx>=0.23,<1.0",
    "multidict>=4.5,<7.0",
    "yarl>=1.0,<2.0",
]

extras_require = {
    "test": ["pytest>=7.0"],
}


def read(*parts):
    return Path(__file__).resolve().parent.joinpath(*parts).read_text().strip()


def read_version():
    regexp = re.compile(r"^__version__\W*=\W*\"([\d.]+)\"")
    for line in read("ropp", "__init__.py").splitlines():
        match = regexp.match(line)
        if match is not None:
            return match.group(1)
    else:
        raise RuntimeError("Cannot find version in ropp/__init__.py")


with open("README.md", "r") as fh:
    long_description = fh.read()


setup(
    name="ropp",
    version=read_version(),
    description="Read-only queries against the Roblox user, friends and groups web APIs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["macOS", "POSIX", "Windows"],
    python_requires=">=3.10",
    project_urls={},
    license="MIT",
    packages=["ropp"],
    package_dir={"ropp": "./ropp"},
    package_data={"ropp": ["py.typed"]},
    install_requires=install_requires,
    extras_require=extras_require,
    include_package_data=True,
)
