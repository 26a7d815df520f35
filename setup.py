from setuptools import setup, find_packages

setup(
    name='recursion-exercises',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'PyYAML>=6.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'recursion-exercises=recursion_exercises.cli:main',
        ],
    },
    description='Textbook recursion exercises: Fibonacci, palindrome check, in-place reversal',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Intended Audience :: Education',
    ],
    keywords='recursion fibonacci palindrome exercises',
    python_requires='>=3.8',
)
