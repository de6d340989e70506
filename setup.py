from setuptools import setup, find_packages

setup(
    name="BNB_KP",
    version="0.1.0",
    description="Exact 0/1 knapsack solving with depth-first branch and bound",
    packages=find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML",
        "numpy",
        "pandas",
        "matplotlib",
        "seaborn",
        "tqdm",
    ],
    extras_require={
        "gurobi": ["gurobipy"],
        "test": ["pytest"],
    },
    # The scripts read configs/config.yaml from the source tree: pip install -e .
    entry_points={
        'console_scripts': [
            'generate = Scripts.generate_data:main',
            'evaluate = Scripts.evaluate_solvers:main',
        ],
    }
)
