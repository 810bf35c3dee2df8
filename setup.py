from setuptools import setup, find_packages

setup(
    name='zp',
    version='0.3.0',

    package_dir={'': 'src'},
    packages=find_packages(where='src'),

    install_requires=[
        'termcolor>=1, <4',
        'colorama>=0.4.6, <2',
    ],
    extras_require={
        'test': [
            'pytest>=6',
        ],
    },

    entry_points={
        'console_scripts': [
            'zp = zp.cli:main',
        ],
    },

    zip_safe=True,

    description="Decoder for ZIP file metadata, with verbose and summary text renderings",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Topic :: System :: Archiving",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
