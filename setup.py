from setuptools import setup, find_packages

setup(
    name="phasefield_mate",
    version="0.1.0",
    description="Material point evaluation for small-strain phase-field fracture",
    author="GraFEA Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
        "matplotlib>=3.4",
    ],
    extras_require={
        "dev": ["pytest>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "phasefield-mate=evaluation.cli:main",
        ],
    },
)
