from setuptools import setup, find_packages

setup(
    name="table_rotate",
    version="0.1.0",
    packages=find_packages(include=["table_rotate", "table_rotate.*"]),
    package_data={"table_rotate": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "rotate_grid=table_rotate.scripts.rotate_grid:main",
        ]
    },
)
