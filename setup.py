from setuptools import setup, find_packages

setup(
    name="core-env-panel",
    version="1.0.0",
    description="Environment Info Panel by CORE SYSTEMS",
    author="CORE SYSTEMS",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "psutil>=5.9",
        "Babel>=2.12",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "gui_scripts": [
            "core-env-panel=env_panel.main:main",
        ],
    },
)
