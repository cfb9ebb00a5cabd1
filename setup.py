from setuptools import find_packages, setup

setup(
    name="santasolver",
    version="0.1.0",
    description="Secret Santa assignments via Hopcroft-Karp maximum bipartite matching",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scipy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
