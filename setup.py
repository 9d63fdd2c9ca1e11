from setuptools import setup, find_packages
from Cython.Build import cythonize


setup(
    name="ngrammer",
    version="1.0.0",
    python_requires=">=3.9",
    packages=find_packages(include=["ngrammer", "ngrammer.*"]),
    ext_modules=cythonize("ngrammer/cython/*.pyx", language_level="3", language="c++"),
    install_requires=[
        "datasets",
        "orjson",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["ngrammer=ngrammer.__main__:main"],
    },
)
