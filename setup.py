from setuptools import setup, find_packages

setup(
    name='bucketlr',
    version='0.1',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'pandas',
        'numpy',
        'matplotlib',
        'scikit-learn'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['bucketlr=bucketlr.cli:main'],
    },
    python_requires='>=3.8',
    description='Single-output logistic regression with bucketed multi-class decisions.',
)
