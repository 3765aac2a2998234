from setuptools import setup, find_packages

setup(
    name='firefx',
    version='0.1.0',
    packages=find_packages(),
    install_requires=[
        'numpy',
        'numba',
        'tqdm',
        'matplotlib',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'ruff>=0.1.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'firefx=firefx.main:main',
        ],
    },
    python_requires='>=3.9',
)
