from setuptools import find_packages, setup

setup(
    name="kvcsv",
    version="0.1.0",
    description="Layered, read-only settings merged from key/value CSV files.",
    author="Araray Velho",
    author_email="araray@gmail.com",
    packages=find_packages(include=["kvcsv", "kvcsv.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "click",
        "rich",
        "toml",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "kvcsv=kvcsv.cli:cli",
        ],
    },
)
