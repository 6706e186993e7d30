from setuptools import find_packages
from setuptools import setup

setup(
    name="facility-seir",
    version="0.1.0",
    license="MIT",
    description="Age/role group stratified SEIR projections of disease spread inside closed facilities.",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0",
        "numba",
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "facility-seir = facility_seir.cli:main",
        ]
    },
)
