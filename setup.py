from setuptools import setup, find_packages

setup(
    name="agentfs",
    version="0.1.0",
    packages=find_packages(include=["agentfs", "agentfs.*", "cli", "cli.*"]),
    install_requires=[
        "typer>=0.9.0",
        "rich>=13.7.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "agentfs=cli.main:app",
        ],
    },
    python_requires=">=3.10",
)
