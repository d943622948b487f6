import tzshortids


TIMEZONE_XML = '''<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE ldmlBCP47 SYSTEM "../../common/dtd/ldmlBCP47.dtd">
<ldmlBCP47>
    <version number="$Revision$"/>
    <keyword>
        <key name="tz" description="Time zone key" alias="timezone">
            <type name="adalv" description="Andorra" alias="Europe/Andorra"/>
            <type name="aedxb" description="Dubai, United Arab Emirates" alias="Asia/Dubai"/>
            <type name="usnyc" description="New York, United States" alias="America/New_York US/Eastern EST5EDT"/>
            <type name="cnckg" description="Chongqing, China" deprecated="true" preferred="cnsha"/>
            <type name="aqams" description="Amundsen-Scott Station, South Pole" deprecated="true" alias="Antarctica/South_Pole" preferred="nzakl"/>
            <type name="utcw01" description="1 hour west of UTC" alias="Etc/GMT+1"/>
            <type name="unk" description="Unknown time zone" alias="Etc/Unknown"/>
            <type name="metazone" description="Metazone" alias="Etc/Metazone"/>
            <type name="Invalid_Name" description="Not a short ID" alias="Etc/Invalid"/>
        </key>
    </keyword>
</ldmlBCP47>
'''


def test_short_ids():
    assert [
        ('adalv', 'Europe/Andorra'),
        ('aedxb', 'Asia/Dubai'),
        ('usnyc', 'America/New_York'),
        ('utcw01', 'Etc/GMT+1'),
    ] == tzshortids.short_ids(TIMEZONE_XML)


def test_short_ids_empty():
    assert [] == tzshortids.short_ids('<ldmlBCP47></ldmlBCP47>')
