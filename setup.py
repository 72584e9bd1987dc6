# setup.py
from setuptools import setup, find_packages

setup(
    name="expense-tracker-model",
    version="2.0.0",
    description="Observable transaction store for a personal expense tracker",
    packages=find_packages(include=["expense_tracker", "expense_tracker.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "expense-tracker=expense_tracker.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
