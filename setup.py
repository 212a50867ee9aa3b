from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="otpkey",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "otpkey=otpkey.__main__:main",
        ],
    },
)
