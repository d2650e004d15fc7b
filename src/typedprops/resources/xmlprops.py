# -*- encoding: utf-8 -*-
# @File   : xmlprops.py
# @Time   : 2024/11/03 15:22:48
# @Author : typedprops contributors

"""XML property documents, i.e.

    ```xml
    <properties>
      <property name="db.hosts">
        <value>10.0.0.1</value>
        <value>10.0.0.2</value>
      </property>
    </properties>
    ```

Values of one property are joined with `,` (`"10.0.0.1,10.0.0.2"`),
so a single value containing a comma reads back as several values.
Encoding follows the XML declaration, `encoding` is ignored.
"""

from xml.etree import ElementTree as et

from ..abstract import ResourceLoader
from ..errors import ConfigIOError

ROOT_TAG = 'properties'
PROPERTY_TAG = 'property'
VALUE_TAG = 'value'


class XmlPropertiesLoader(ResourceLoader):
    def read(self) -> dict[str, str]:
        root = et.parse(self._fn).getroot()
        if root.tag != ROOT_TAG:
            raise ConfigIOError(
                self._fn, f'root element must be <{ROOT_TAG}>, not <{root.tag}>')
        ret: dict[str, str] = {}
        for prop in root.iter(PROPERTY_TAG):
            if not (name := prop.attrib.get('name')):
                raise ConfigIOError(
                    self._fn, f'<{PROPERTY_TAG}> requires a "name" attribute')
            ret[name] = ','.join(
                ''.join(v.itertext()) for v in prop.iter(VALUE_TAG))
        return ret
