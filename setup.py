from setuptools import setup, find_packages

setup(
    name='wryneck',
    version='0.1.0',
    py_modules=['wry', 'frontend'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'lark',
        'pydantic>=2.0',
        'pydantic-core',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'wry = wry:main',
        ],
    },
)
