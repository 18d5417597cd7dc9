from setuptools import find_packages, setup

setup(
    name='assocarray',
    version='0.1',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    license='MIT License',
    description='A minimal associative array backed by a linear array of '
                'key/value pairs',
    python_requires='>=3.9',
    install_requires=[
        'attrs',
        'pyrsistent',
        'typing_extensions',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
