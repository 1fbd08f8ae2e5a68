#!/usr/bin/env python3

from setuptools import setup

version = '1.0.0'
author = 'Azaria Zornberg'
email = 'a.zornberg96@gmail.com'
license_str = 'MIT License'
url = 'https://github.com/zorn96/ad_dc_finder/'
description = 'Find the Active Directory domain controllers reachable from the local network'
package_name = 'ad_dc_finder'
package_folder = '.'

long_description = open('README.md', encoding='utf-8').read()
packages = ['ad_dc_finder',
            'ad_dc_finder.core',
            'ad_dc_finder.environment',
            'ad_dc_finder.environment.discovery',
            ]


setup_kwargs = {
    'packages': packages,
    'package_dir': {'': package_folder},
}

requirements = ['dnspython>=2.1.0',
                'ldap3>=2.8.0',
                ]

test_requirements = ['pytest>=6.0',
                     ]

setup(name=package_name,
      version=version,
      install_requires=requirements,
      extras_require={'test': test_requirements},
      entry_points={
          'console_scripts': [
              'find-domain-controllers=ad_dc_finder.cli:main',
          ],
      },
      license=license_str,
      author=author,
      author_email=email,
      description=description,
      long_description=long_description,
      long_description_content_type='text/markdown',
      keywords='python3 ldap dns microsoft windows active-directory domain-controller discovery ad',
      python_requires=">=3.6",
      url=url,
      classifiers=['Development Status :: 4 - Beta',
                   'Intended Audience :: Information Technology',
                   'Intended Audience :: System Administrators',
                   'License :: OSI Approved :: MIT License',
                   'Operating System :: MacOS :: MacOS X',
                   'Operating System :: Microsoft :: Windows',
                   'Operating System :: POSIX :: Linux',
                   'Programming Language :: Python :: 3',
                   'Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP',
                   ],
      **setup_kwargs
      )
