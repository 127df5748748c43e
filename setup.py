# setup.py
from setuptools import setup, find_packages

setup(
    name="zabb",
    version="1.0.0",
    description="Find the shortest abbreviations that jump (z) to a directory with zoxide or fasd",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "zabb": ["interface/locales/*.json"],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'zabb=zabb.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Environment :: Console",
    ],
)
