import setuptools

setuptools.setup(
    name='skistep',
    version='0.1.0',
    description='Step-by-step rewriting of SKI combinator terms',
    packages=['skistep'],
    python_requires='>=3.8',
    install_requires=['parsable'],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    entry_points={
        'console_scripts': ['skistep=skistep.__main__:parsable'],
    },
)
