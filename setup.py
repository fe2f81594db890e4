from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = (BASE_DIR / "requirements_lib.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Test-only requirements
# ----------------------------------------------------------------------
requirements_test = (BASE_DIR / "requirements_test.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "test": requirements_test,
}

# ----------------------------------------------------------------------
setup(
    name="czech-birth-number",
    version=version,
    description="Validator of Czech birth numbers (rodné číslo)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=[
            "birth_number_lib*",
            "birth_number_cli*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements_lib,
    extras_require=extras,
    entry_points={
        "console_scripts": {
            "birth-number-check=birth_number_cli.check:main",
        }
    },
)
