"""
Capability Matrix

FLOW OVERVIEW
- build_capabilities(config)
  • Returns the ordered descriptors the journey runs against, each carrying
    the project/build labels and session flags from config.
"""

from typing import List

from ..models.capability import CapabilityDescriptor


def build_capabilities(config) -> List[CapabilityDescriptor]:
    """Default desktop + real device matrix"""
    labels = {
        'project_name': config.PROJECT_NAME,
        'build_name': config.BUILD_NAME,
        'debug': config.DEBUG,
        'network_logs': config.NETWORK_LOGS,
    }
    return [
        # Windows 10 Chrome
        CapabilityDescriptor.desktop('Windows', '10', 'Chrome', **labels),
        # macOS Ventura Firefox
        CapabilityDescriptor.desktop('OS X', 'Ventura', 'Firefox', **labels),
        # Samsung Galaxy S22 real device, stock Android browser
        CapabilityDescriptor.mobile('Samsung Galaxy S22', 'Android', real_mobile=True, **labels),
    ]
