from pathlib import Path

from setuptools import find_packages, setup

readme = Path(__file__).resolve().parent / 'README.rst'


setup(
    name='sortedset',
    version='0.3.0',
    license='GNU Lesser General Public License v3 (LGPLv3)',
    description='A set that iterates over its members in ascending order',
    long_description=readme.read_text(encoding='utf-8'),
    long_description_content_type='text/x-rst',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.11',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Libraries',
    ],
    keywords=[
        'set',
        'sorted',
        'collections',
    ],
    install_requires=[
        'appdirs>=1.4.4',
    ],
    extras_require={
        'tests': [
            'pytest>=7.0',
            'pyfakefs>=5.0',
            'hypothesis>=6.0',
        ],
    },
)
