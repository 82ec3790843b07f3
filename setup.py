from setuptools import find_packages, setup

setup(
    name='csswright',
    version='0.1.0',
    description='Building of CSS selector text from typed fragments',
    python_requires='>=3.11', # `enum.StrEnum` and `match` statements are used throughout
    package_dir={ '': 'src' },
    packages=find_packages('src'),
    extras_require={
        'test': [ 'pytest' ],
        'dev': [ 'mypy', 'pytest' ],
    },
)
