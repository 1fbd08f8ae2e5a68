# Created in August 2021
#
# Author: Azaria Zornberg
#
# Copyright 2021 - 2021 Azaria Zornberg
#
# This file is part of ad_dc_finder
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from ad_dc_finder.core.connectivity_probe import (
    is_ldap_service,
    is_tcp_port_open,
)

from ad_dc_finder.core.discovered_server import (
    DiscoveredServer,
    DiscoveryMethod,
)

from ad_dc_finder.core.domain_controller_finder import (
    DomainControllerFinder,
)

from ad_dc_finder.core.result_reporter import (
    ResultReporter,
    deduplicate_servers,
)

from ad_dc_finder.environment.discovery.candidate_generation import (
    generate_common_name_candidates,
    generate_dns_a_record_candidates,
    generate_dns_srv_candidates,
    generate_environment_candidates,
)
from ad_dc_finder.environment.discovery.domain_name_utils import (
    find_local_domain_name,
)

from ad_dc_finder.exceptions import *
from ad_dc_finder.logging_utils import configure_log_level, get_logger
