from setuptools import setup, find_packages

setup(
    name='pathget',
    version='0.1.0',
    author='Thomas Hansen',
    author_email='thomas.hansen@queensu.ca',
    description='Safely read nested values from Python objects by dotted/bracketed path.',
    packages=find_packages(include=['pathget', 'pathget.*']),
    include_package_data=True,
    install_requires=[
        'click>=8.0',
        'pydantic>=2.0',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            # 'pathget' command will call the main() group in pathget/cli.py
            "pathget = pathget.cli:main",
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
