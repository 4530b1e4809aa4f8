"""supernovas Package setup file."""
# Third Party Imports
import setuptools

setuptools.setup(
    name="supernovas",
    description="Exact, nanosecond-resolution Julian dates for astronomical time keeping",
    version="0.1.0",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    package_data={
        "supernovas.common": [
            "default_behavior.config",
        ],
    },
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.19",
    ],
    extras_require={
        "dev": [
            # Linting
            "ruff==0.1.1",
            "pylint==3.0.0",
            # Type Checking
            "mypy==1.6.0",
            # Formatters
            "black==23.9.1",
            "isort[colors]==5.12.0",
            # Pre-commit stuff
            "pre-commit==3.5.0",
        ],
        "test": [
            "pytest>=7.4.2",
            "pytest-randomly>=3.15.0",
            "pytest-cov>=4.1.0",
        ],
    },
    zip_safe=False,
)
