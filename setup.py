from setuptools import setup, find_packages

with open("README.md") as f:
    long_description = f.read()


setup(
    name="odscell",
    version="0.1.0",
    description="Typed value conversion for OpenDocument spreadsheet cells.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="opendocument ods spreadsheet cell parsing lxml",
    license="MIT",
    packages=find_packages(exclude=["ez_setup", "examples", "tests"]),
    namespace_packages=[],
    include_package_data=True,
    package_data={"": ["odscell/py.typed"]},
    zip_safe=False,
    install_requires=[
        "lxml",
        "structlog",
        "click >= 8.0.0",
        "banal",
        "rigour",
        "orjson",
        "python-dateutil",
        "pendulum",
    ],
    tests_require=[],
    entry_points={
        "console_scripts": [
            "odscell = odscell.cli:cli",
        ],
    },
    extras_require={
        "dev": [
            "wheel>=0.29.0",
            "twine",
            "mypy",
            "flake8>=2.6.0",
            "pytest",
            "pytest-cov",
            "lxml-stubs",
            "coverage>=4.1",
            "types-python-dateutil",
        ]
    },
)
