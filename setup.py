# setup.py
from setuptools import setup, find_packages

install_requires = [
    # --- UI & REACTIVE ---
    # FletXr pulls in Flet; it is published as a pre-release:
    # uv pip install FletXr --pre
    "flet>=0.70.0",
    "FletXr",

    # --- MODELS & CONFIG ---
    "pydantic>=2.0.0",
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",
]

extras_require = {
    # --- TESTS---
    "test": [
        "pytest-asyncio==1.3.0",
        "pytest",
    ],
}

setup(
    name="Marquee",
    version="0.1.0",
    description="Marquee - movie browser with explicit navigation state",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"marquee.data": ["*.json"]},
    include_package_data=True,
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "marquee=marquee.app.main:run",
        ],
    },
    python_requires=">=3.11",
)
