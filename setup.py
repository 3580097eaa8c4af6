from setuptools import setup, find_packages

setup(
    name="prismlog",
    version="0.1.0",
    description="Rule-based colorized console logging",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
