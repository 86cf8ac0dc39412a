# setup.py
from setuptools import setup, find_packages

setup(
    name="projectlister",
    version="1.0.0",
    description="Lists the projects of a solution tree, nested sub-projects included and solution folders excluded",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'projectlister=projectlister.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
