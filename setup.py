from setuptools import find_packages, setup

setup(
    name="crawlls",
    version="0.1.0",
    description="Language server that opens links as locally cached markdown copies",
    packages=find_packages(include=["crawlls", "crawlls.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration models
        "typer",  # Command line entry point
        "requests",  # Page downloads
        "docling",  # Required HTML/PDF to markdown conversion engine
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "crawlls=crawlls.cli:main",
        ],
    },
)
