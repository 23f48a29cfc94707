from setuptools import setup, find_packages

setup(
    name="teamcity-project-features",
    version="0.1.0",
    description="Project feature settings adapters for the TeamCity REST API",
    author="TeamCity Provider Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.5.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    python_requires=">=3.10",
)
