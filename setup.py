# setup.py
from setuptools import setup, find_packages

setup(
    name="declcompare",
    version="0.1.0",
    description="Canonical text comparison of declaration trees with golden snapshot files",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'declcompare=declcompare.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
