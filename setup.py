# setup.py
from setuptools import setup, find_packages

setup(
    name="proptree",
    version="0.1.0",
    description="Typed, dotted-path access and structural merge for hierarchical configuration values",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
