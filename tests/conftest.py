"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_mcq_content():
    """Generated MCQ output with three questions in the usual formats."""
    return """## Question 1
**Question:** Which layer of the OSI model handles routing?
A) Physical Layer
B) Data Link Layer
C) Network Layer
D) Transport Layer
**Correct Answer:** C) Network Layer
**Explanation:** Routers operate at Layer 3.
They forward packets between networks.

---

**Question 2:** What does TCP guarantee that UDP does not?
A) Lower latency
B) Reliable, ordered delivery
C) Broadcast support
D) Smaller headers
Correct Answer: B
Explanation: TCP retransmits lost segments and reorders them.

---

3. Which protocol resolves IP addresses to MAC addresses?
A) DNS
B) DHCP
C) ARP
D) ICMP
Answer: C
"""


@pytest.fixture
def sample_slides_content():
    """Generated slide deck output."""
    return """## Introduction to Networking
- What is a network?
- **Why** networks matter

## The OSI Model
* Seven layers
• Each layer serves the one above
Layers communicate with their peers.

---

## Summary
"""


@pytest.fixture
def sample_notes_content():
    """Generated notes output with sections and subsections."""
    return """# Networking Notes

## Introduction
Networks connect devices.
They share **resources**.

### History
ARPANET was the first packet-switched network.

### Today
The internet links billions of devices.

## Protocols
### TCP
Reliable transport.
### UDP
Best-effort transport.

## Empty Section
"""
