#! /usr/bin/env python

from setuptools import setup, find_packages
import re

version = ''
with open('textrank/__init__.py', 'r') as fd:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', fd.read(), re.MULTILINE).group(1)

readme_md = ''
with open('README.md', 'r', encoding='utf-8') as f:
    readme_md = f.read()

setup(name='textrank-languages',
    version=version,
    description='Language adapters (sentence splitting, tokenization, PoS tagging, stemming) for TextRank',
    long_description=readme_md,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['textrank', 'textrank.*']),
    package_data={
        'textrank': ['textrank.yml.dist'],
        'textrank.languages': ['*/*_stop_words.txt'],
    },
    python_requires='>=3.9',
    install_requires=[
        'nltk',
        'PyStemmer',
        'PyYAML',
        'sentence_splitter',
        'spacy>=3.8,<3.9',
        'nl_core_news_sm @ '
        'https://github.com/explosion/spacy-models/releases/download/nl_core_news_sm-3.8.0/'
        'nl_core_news_sm-3.8.0-py3-none-any.whl',
    ],
    license='MIT',
    zip_safe=False,
    extras_require={'test': ['pytest']}
)
