"""Render a view descriptor as a Maven POM."""
from __future__ import annotations

import xml.etree.ElementTree as ET

from reactorview.core.view.models import AGGREGATOR_PACKAGING, ViewDescriptor

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
POM_SCHEMA_LOCATION = f"{POM_NAMESPACE} https://maven.apache.org/xsd/maven-4.0.0.xsd"

# Maven spells an aggregator's packaging "pom".
_MAVEN_PACKAGING = {AGGREGATOR_PACKAGING: "pom"}


def build_pom_element(descriptor: ViewDescriptor) -> ET.Element:
    project = ET.Element(
        "project",
        {
            "xmlns": POM_NAMESPACE,
            "xmlns:xsi": XSI_NAMESPACE,
            "xsi:schemaLocation": POM_SCHEMA_LOCATION,
        },
    )
    ET.SubElement(project, "modelVersion").text = descriptor.model_version
    ET.SubElement(project, "groupId").text = descriptor.group_id
    ET.SubElement(project, "artifactId").text = descriptor.artifact_id
    ET.SubElement(project, "packaging").text = _MAVEN_PACKAGING.get(
        descriptor.packaging, descriptor.packaging
    )
    if descriptor.modules:
        modules = ET.SubElement(project, "modules")
        for module in descriptor.modules:
            ET.SubElement(modules, "module").text = module
    return project


def render_pom(descriptor: ViewDescriptor) -> str:
    """Return the complete ``pom.xml`` text for ``descriptor``."""
    project = build_pom_element(descriptor)
    ET.indent(project, space="  ")
    body = ET.tostring(project, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


__all__ = ["POM_NAMESPACE", "build_pom_element", "render_pom"]
