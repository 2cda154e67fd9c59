from setuptools import setup
from argv.const import VERSION_STR, DESCRIPTION

setup(
    name="argv",
    version=VERSION_STR,
    python_requires=">=3.10",
    description=DESCRIPTION,
    packages=["argv"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "argv = argv:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
