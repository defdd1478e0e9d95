import setuptools

setuptools.setup(
    name='blasargs',
    version='0.1.0',
    author='',
    description='Symbolic argument translation for BLAS and LAPACK kernels',
    packages=setuptools.find_packages(),
    classifiers=[
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Development Status :: 2 - Pre Alpha',
        'Operating System :: OS Independent',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics'
    ],
    python_requires='>=3.8',
    install_requires=["numpy >= 1.17",
                      "scipy >= 1.1",
                      "pytest"]
)
