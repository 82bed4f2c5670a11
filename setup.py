from setuptools import setup, find_packages

setup(
    name="makhot",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "makhot=makhot.__main__:main",
        ],
    },
    author="Mak-Hot Team",
    description="Thai Checkers (Mak-Hot) rules engine and alpha-beta bot",
)
