from setuptools import setup, find_packages

setup(
    name='segment-tree',
    version=open("version.txt").read().strip(),
    packages=find_packages(include=["segment_tree", "segment_tree.*"]),
    python_requires=">=3.7",
    license='Apache 2.0',
    install_requires=[req for req in open("requirements.txt").read().split("\n") if len(req) > 0],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["segment-tree=segment_tree.cli.main:run_main"]},
    description='Generic segment tree with pluggable range computations: sum, max, min and max slice sum',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: Apache Software License",
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed"
    ]
)
