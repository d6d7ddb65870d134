from setuptools import setup, find_packages

setup(
    name="linum",
    version="0.1.0",
    description="Number the lines of a text file, like nl / cat -n",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "linum=linum.main:app",
        ],
    },
    python_requires=">=3.11",
)
