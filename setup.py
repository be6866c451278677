from setuptools import setup, find_packages

# -------------------------------------------------
# Requirements
# -------------------------------------------------

install_requires = [
    "numpy>=1.21.0",
    "biopython>=1.79",
    "pandas>=1.3.0",
    "matplotlib>=3.5.0",
    "pyyaml>=6.0",
]

extras_require = {
    "test": [
        "pytest>=7.0",
    ],
}

# -------------------------------------------------
# Setup
# -------------------------------------------------

setup(
    name="seed-alignment",
    version="1.0.0",
    description="Stockholm seed alignment parsing, consensus calling and A2M conversion",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"seed_alignment.config": ["default_config.yaml"]},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "seed-alignment=seed_alignment.scripts.process_seed:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
