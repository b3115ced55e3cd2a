from setuptools import setup, find_packages


setup(
    name="biogff",
    version="0.1.0",
    description=(
        "Parsing and writing of single feature lines in the "
        "General Feature Format (GFF2 and GFF3)"
    ),
    license="BSD-3-Clause",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "numpy >= 1.19",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
