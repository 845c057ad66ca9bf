from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.0",
    "requests>=2.28.2",
    "tqdm>=4.65.0",
    "typer>=0.9.0",
    "jinja2>=3.1",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="tobit",
    version="0.1.0",
    packages=find_packages(include=["tobit", "tobit.*"]),
    package_data={"tobit.rendering": ["templates/*.j2"]},
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "tobit=tobit.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Multi-witness annotated corpus of the Georgian Book of Tobit: parsing, annotation merge and concordance search",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
