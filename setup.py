from setuptools import setup, find_packages

setup(
    name="fabric_claims",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"fabric_claims": ["configs/*.yaml"]},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "matplotlib",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "claim_overlap=fabric_claims.scripts.run_overlap:main",
        ]
    },
)
