"""Reference node catalog.

The built-in catalog lists public resolvers, cloud and carrier hosts with
the city they are believed to sit in. Coordinates are city centres, not
data-centre positions. Entries are neither range-checked nor de-duplicated.
"""

import csv
import logging
from pathlib import Path

from pinggeo.models import ReferenceNode

logger = logging.getLogger(__name__)

CSV_FIELDS = ("name", "address", "country", "city", "latitude", "longitude")

_N = ReferenceNode

DEFAULT_CATALOG: tuple[ReferenceNode, ...] = (
    # France
    _N("Cloudflare", "1.1.1.1", "France", "Paris", 48.8566, 2.3522),
    _N("Google DNS", "216.58.213.195", "France", "Paris", 48.8566, 2.3522),
    _N("OVH", "54.36.0.1", "France", "Paris", 48.8566, 2.3522),
    _N("Scaleway", "51.15.0.1", "France", "Paris", 48.8566, 2.3522),
    _N("Online", "62.210.0.1", "France", "Paris", 48.8566, 2.3522),
    _N("Free", "212.27.48.10", "France", "Paris", 48.8566, 2.3522),
    _N("Orange", "80.10.246.2", "France", "Paris", 48.8566, 2.3522),
    _N("OVH-Strasbourg", "51.68.0.1", "France", "Strasbourg", 48.5734, 7.7521),

    # United Kingdom
    _N("Google-UK", "8.8.4.4", "UK", "London", 51.5074, -0.1278),
    _N("Cloudflare-UK", "1.0.0.1", "UK", "London", 51.5074, -0.1278),
    _N("BBC", "212.58.244.67", "UK", "London", 51.5074, -0.1278),
    _N("DigitalOcean", "178.62.0.1", "UK", "London", 51.5074, -0.1278),
    _N("Linode", "178.79.128.1", "UK", "London", 51.5074, -0.1278),
    _N("Vodafone", "194.73.73.73", "UK", "London", 51.5074, -0.1278),
    _N("BT", "194.72.9.38", "UK", "London", 51.5074, -0.1278),

    # Germany
    _N("Hetzner", "213.133.100.1", "Germany", "Frankfurt", 50.1109, 8.6821),
    _N("AWS-DE", "52.59.0.1", "Germany", "Frankfurt", 50.1109, 8.6821),
    _N("Google-DE", "216.58.207.67", "Germany", "Frankfurt", 50.1109, 8.6821),
    _N("Contabo", "213.136.64.1", "Germany", "Frankfurt", 50.1109, 8.6821),
    _N("IONOS", "217.160.0.1", "Germany", "Frankfurt", 50.1109, 8.6821),
    _N("Telekom-DE", "217.0.43.145", "Germany", "Frankfurt", 50.1109, 8.6821),
    _N("Hetzner-Nuremberg", "213.239.192.1", "Germany", "Nuremberg", 49.4521, 11.0767),
    _N("1&1", "217.237.148.22", "Germany", "Karlsruhe", 49.0069, 8.4037),

    # Netherlands
    _N("Transip", "195.8.195.8", "Netherlands", "Amsterdam", 52.3676, 4.9041),
    _N("LeaseWeb", "5.79.73.204", "Netherlands", "Amsterdam", 52.3676, 4.9041),
    _N("Vultr-AMS", "108.61.0.1", "Netherlands", "Amsterdam", 52.3676, 4.9041),
    _N("DigitalOcean-AMS", "188.166.0.1", "Netherlands", "Amsterdam", 52.3676, 4.9041),
    _N("Google-NL", "216.58.211.3", "Netherlands", "Amsterdam", 52.3676, 4.9041),
    _N("KPN", "195.121.1.34", "Netherlands", "Rotterdam", 51.9225, 4.4792),

    # Spain
    _N("Telefonica", "194.179.1.100", "Spain", "Madrid", 40.4168, -3.7038),
    _N("Orange-ES", "62.36.225.150", "Spain", "Madrid", 40.4168, -3.7038),
    _N("Vodafone-ES", "193.110.157.151", "Spain", "Madrid", 40.4168, -3.7038),
    _N("AWS-ES", "15.161.0.1", "Spain", "Madrid", 40.4168, -3.7038),
    _N("Google-ES", "216.58.215.67", "Spain", "Barcelona", 41.3851, 2.1734),

    # Italy
    _N("Aruba", "62.149.128.2", "Italy", "Milan", 45.4642, 9.1900),
    _N("Telecom-IT", "151.99.125.1", "Italy", "Milan", 45.4642, 9.1900),
    _N("Fastweb", "195.110.124.188", "Italy", "Milan", 45.4642, 9.1900),
    _N("Google-IT", "216.58.213.3", "Italy", "Milan", 45.4642, 9.1900),
    _N("AWS-IT", "15.160.0.1", "Italy", "Milan", 45.4642, 9.1900),

    # Switzerland
    _N("Swisscom", "195.186.1.111", "Switzerland", "Zurich", 47.3769, 8.5417),
    _N("Init7", "77.109.128.2", "Switzerland", "Zurich", 47.3769, 8.5417),
    _N("Google-CH", "216.58.215.3", "Switzerland", "Zurich", 47.3769, 8.5417),
    _N("Cloudflare-CH", "162.158.0.1", "Switzerland", "Geneva", 46.2044, 6.1432),
    _N("Green", "80.74.140.10", "Switzerland", "Zurich", 47.3769, 8.5417),

    # Sweden
    _N("Telia-SE", "62.20.66.66", "Sweden", "Stockholm", 59.3293, 18.0686),
    _N("Bahnhof", "195.67.199.2", "Sweden", "Stockholm", 59.3293, 18.0686),
    _N("Google-SE", "216.58.211.67", "Sweden", "Stockholm", 59.3293, 18.0686),
    _N("AWS-SE", "13.48.0.1", "Sweden", "Stockholm", 59.3293, 18.0686),
    _N("TeliaSonera", "213.242.116.19", "Sweden", "Stockholm", 59.3293, 18.0686),

    # Poland
    _N("OVH-PL", "91.216.107.2", "Poland", "Warsaw", 52.2297, 21.0122),
    _N("Google-PL", "216.58.215.195", "Poland", "Warsaw", 52.2297, 21.0122),
    _N("Orange-PL", "80.55.240.10", "Poland", "Warsaw", 52.2297, 21.0122),
    _N("T-Mobile-PL", "213.180.130.10", "Poland", "Warsaw", 52.2297, 21.0122),
    _N("AWS-PL", "15.236.0.1", "Poland", "Warsaw", 52.2297, 21.0122),

    # USA east
    _N("Google-NY", "142.250.185.46", "USA", "New York", 40.7128, -74.0060),
    _N("DigitalOcean-NY", "192.241.128.1", "USA", "New York", 40.7128, -74.0060),
    _N("Linode-Newark", "66.228.32.1", "USA", "Newark", 40.7357, -74.1724),
    _N("Verizon-NY", "208.48.0.1", "USA", "New York", 40.7128, -74.0060),
    _N("GTT-NY", "89.149.128.1", "USA", "New York", 40.7128, -74.0060),
    _N("AWS-NY", "54.210.0.1", "USA", "New York", 40.7128, -74.0060),
    _N("Hurricane-NY", "216.66.1.2", "USA", "New York", 40.7128, -74.0060),

    # USA west
    _N("Google-CA", "216.58.217.206", "USA", "Los Angeles", 34.0522, -118.2437),
    _N("Cloudflare-SJ", "104.16.0.1", "USA", "San Jose", 37.3382, -121.8863),
    _N("AWS-CA", "52.8.0.1", "USA", "San Francisco", 37.7749, -122.4194),
    _N("DigitalOcean-SF", "159.65.0.1", "USA", "San Francisco", 37.7749, -122.4194),
    _N("Linode-Fremont", "50.116.0.1", "USA", "Fremont", 37.5483, -121.9886),
    _N("Hurricane-LA", "216.218.186.2", "USA", "Los Angeles", 34.0522, -118.2437),
    _N("Cogent-LA", "38.142.0.1", "USA", "Los Angeles", 34.0522, -118.2437),

    # USA central
    _N("Vultr-Chicago", "207.246.64.1", "USA", "Chicago", 41.8781, -87.6298),
    _N("DigitalOcean-CHI", "159.89.0.1", "USA", "Chicago", 41.8781, -87.6298),
    _N("Google-CHI", "216.58.193.46", "USA", "Chicago", 41.8781, -87.6298),
    _N("AWS-CHI", "3.128.0.1", "USA", "Chicago", 41.8781, -87.6298),
    _N("Linode-Chicago", "45.79.0.1", "USA", "Chicago", 41.8781, -87.6298),

    # USA south
    _N("Google-TX", "216.58.195.46", "USA", "Dallas", 32.7767, -96.7970),
    _N("Vultr-Dallas", "108.61.224.1", "USA", "Dallas", 32.7767, -96.7970),
    _N("AWS-TX", "3.16.0.1", "USA", "Dallas", 32.7767, -96.7970),
    _N("DigitalOcean-TX", "159.203.0.1", "USA", "Dallas", 32.7767, -96.7970),
    _N("Hurricane-TX", "64.62.128.1", "USA", "Dallas", 32.7767, -96.7970),

    # Canada
    _N("OVH-CA", "51.222.0.1", "Canada", "Montreal", 45.5017, -73.5673),
    _N("Google-CA", "216.58.193.67", "Canada", "Toronto", 43.6532, -79.3832),
    _N("AWS-CA", "15.223.0.1", "Canada", "Montreal", 45.5017, -73.5673),
    _N("DigitalOcean-TOR", "159.203.64.1", "Canada", "Toronto", 43.6532, -79.3832),
    _N("Cloudflare-TOR", "104.16.128.1", "Canada", "Toronto", 43.6532, -79.3832),
    _N("Bell-CA", "64.230.160.1", "Canada", "Montreal", 45.5017, -73.5673),

    # Brazil
    _N("Google-BR", "216.58.222.67", "Brazil", "São Paulo", -23.5505, -46.6333),
    _N("AWS-BR", "18.231.0.1", "Brazil", "São Paulo", -23.5505, -46.6333),
    _N("Cloudflare-BR", "104.16.192.1", "Brazil", "São Paulo", -23.5505, -46.6333),
    _N("DigitalOcean-BR", "159.89.192.1", "Brazil", "São Paulo", -23.5505, -46.6333),
    _N("Locaweb", "200.234.224.2", "Brazil", "São Paulo", -23.5505, -46.6333),
    _N("Vivo-BR", "200.142.0.1", "Brazil", "Rio de Janeiro", -22.9068, -43.1729),

    # Argentina
    _N("Google-AR", "216.58.222.195", "Argentina", "Buenos Aires", -34.6037, -58.3816),
    _N("Telecom-AR", "200.51.211.11", "Argentina", "Buenos Aires", -34.6037, -58.3816),
    _N("Claro-AR", "200.45.191.11", "Argentina", "Buenos Aires", -34.6037, -58.3816),
    _N("Arsat", "200.61.47.1", "Argentina", "Buenos Aires", -34.6037, -58.3816),
    _N("Fibertel", "200.115.100.2", "Argentina", "Buenos Aires", -34.6037, -58.3816),

    # Chile
    _N("Google-CL", "216.58.222.3", "Chile", "Santiago", -33.4489, -70.6693),
    _N("AWS-CL", "15.220.0.1", "Chile", "Santiago", -33.4489, -70.6693),
    _N("Movistar-CL", "200.28.16.68", "Chile", "Santiago", -33.4489, -70.6693),
    _N("VTR", "200.104.237.131", "Chile", "Santiago", -33.4489, -70.6693),
    _N("Entel-CL", "200.73.97.18", "Chile", "Santiago", -33.4489, -70.6693),

    # Japan
    _N("Google-JP", "216.58.220.195", "Japan", "Tokyo", 35.6762, 139.6503),
    _N("AWS-JP", "54.178.0.1", "Japan", "Tokyo", 35.6762, 139.6503),
    _N("Linode-JP", "139.162.64.1", "Japan", "Tokyo", 35.6762, 139.6503),
    _N("Sakura", "153.120.0.1", "Japan", "Tokyo", 35.6762, 139.6503),
    _N("GMO", "157.7.0.1", "Japan", "Tokyo", 35.6762, 139.6503),
    _N("NTT-JP", "129.250.0.1", "Japan", "Tokyo", 35.6762, 139.6503),
    _N("Softbank", "221.113.192.1", "Japan", "Tokyo", 35.6762, 139.6503),

    # Singapore
    _N("Google-SG", "216.58.199.67", "Singapore", "Singapore", 1.3521, 103.8198),
    _N("AWS-SG", "54.254.0.1", "Singapore", "Singapore", 1.3521, 103.8198),
    _N("DigitalOcean-SG", "188.166.128.1", "Singapore", "Singapore", 1.3521, 103.8198),
    _N("Linode-SG", "139.162.0.1", "Singapore", "Singapore", 1.3521, 103.8198),
    _N("Vultr-SG", "45.32.0.1", "Singapore", "Singapore", 1.3521, 103.8198),
    _N("Singtel", "165.21.0.1", "Singapore", "Singapore", 1.3521, 103.8198),

    # South Korea
    _N("Google-KR", "216.58.197.67", "South Korea", "Seoul", 37.5665, 126.9780),
    _N("AWS-KR", "3.36.0.1", "South Korea", "Seoul", 37.5665, 126.9780),
    _N("KT", "168.126.63.1", "South Korea", "Seoul", 37.5665, 126.9780),
    _N("LG-U+", "164.124.101.2", "South Korea", "Seoul", 37.5665, 126.9780),
    _N("SK-Telecom", "210.220.163.82", "South Korea", "Seoul", 37.5665, 126.9780),

    # India
    _N("Google-IN", "216.58.196.67", "India", "Mumbai", 19.0760, 72.8777),
    _N("AWS-IN", "13.233.0.1", "India", "Mumbai", 19.0760, 72.8777),
    _N("DigitalOcean-IN", "159.65.144.1", "India", "Bangalore", 12.9716, 77.5946),
    _N("Cloudflare-IN", "104.16.224.1", "India", "Mumbai", 19.0760, 72.8777),
    _N("Bharti", "182.74.0.1", "India", "Delhi", 28.7041, 77.1025),
    _N("Reliance", "49.205.0.1", "India", "Mumbai", 19.0760, 72.8777),

    # Hong Kong
    _N("Google-HK", "216.58.197.195", "Hong Kong", "Hong Kong", 22.3193, 114.1694),
    _N("AWS-HK", "18.166.0.1", "Hong Kong", "Hong Kong", 22.3193, 114.1694),
    _N("DigitalOcean-HK", "159.89.224.1", "Hong Kong", "Hong Kong", 22.3193, 114.1694),
    _N("Cloudflare-HK", "104.16.64.1", "Hong Kong", "Hong Kong", 22.3193, 114.1694),
    _N("PCCW", "202.45.128.1", "Hong Kong", "Hong Kong", 22.3193, 114.1694),

    # Australia
    _N("Google-AU", "216.58.203.67", "Australia", "Sydney", -33.8688, 151.2093),
    _N("AWS-AU", "54.206.0.1", "Australia", "Sydney", -33.8688, 151.2093),
    _N("DigitalOcean-AU", "159.65.128.1", "Australia", "Sydney", -33.8688, 151.2093),
    _N("Linode-AU", "172.105.160.1", "Australia", "Sydney", -33.8688, 151.2093),
    _N("Vultr-AU", "45.76.0.1", "Australia", "Sydney", -33.8688, 151.2093),
    _N("Telstra", "203.50.0.1", "Australia", "Melbourne", -37.8136, 144.9631),
    _N("Optus", "211.29.132.12", "Australia", "Sydney", -33.8688, 151.2093),

    # New Zealand
    _N("Google-NZ", "216.58.199.195", "New Zealand", "Auckland", -36.8485, 174.7633),
    _N("AWS-NZ", "13.239.0.1", "New Zealand", "Auckland", -36.8485, 174.7633),
    _N("Spark", "203.109.129.68", "New Zealand", "Auckland", -36.8485, 174.7633),
    _N("Vodafone-NZ", "202.27.184.3", "New Zealand", "Auckland", -36.8485, 174.7633),
    _N("2degrees", "203.167.251.1", "New Zealand", "Auckland", -36.8485, 174.7633),

    # South Africa
    _N("Google-ZA", "216.58.223.67", "South Africa", "Johannesburg", -26.2041, 28.0473),
    _N("AWS-ZA", "13.244.0.1", "South Africa", "Cape Town", -33.9249, 18.4241),
    _N("Cloudflare-ZA", "104.17.0.1", "South Africa", "Johannesburg", -26.2041, 28.0473),
    _N("Telkom", "196.25.1.1", "South Africa", "Johannesburg", -26.2041, 28.0473),
    _N("MTN", "41.203.0.1", "South Africa", "Johannesburg", -26.2041, 28.0473),
    _N("Vodacom", "196.207.40.165", "South Africa", "Johannesburg", -26.2041, 28.0473),

    # Egypt
    _N("Google-EG", "216.58.214.195", "Egypt", "Cairo", 30.0444, 31.2357),
    _N("Cloudflare-EG", "104.17.64.1", "Egypt", "Cairo", 30.0444, 31.2357),
    _N("TE-Data", "196.219.0.1", "Egypt", "Cairo", 30.0444, 31.2357),
    _N("Orange-EG", "41.128.0.1", "Egypt", "Cairo", 30.0444, 31.2357),
    _N("Vodafone-EG", "41.32.0.1", "Egypt", "Cairo", 30.0444, 31.2357),

    # United Arab Emirates
    _N("Google-UAE", "216.58.214.67", "UAE", "Dubai", 25.2048, 55.2708),
    _N("AWS-UAE", "3.29.0.1", "UAE", "Dubai", 25.2048, 55.2708),
    _N("Cloudflare-UAE", "104.17.128.1", "UAE", "Dubai", 25.2048, 55.2708),
    _N("Etisalat", "213.42.20.20", "UAE", "Dubai", 25.2048, 55.2708),
    _N("Du", "195.229.241.222", "UAE", "Dubai", 25.2048, 55.2708),

    # Israel
    _N("Google-IL", "216.58.212.195", "Israel", "Tel Aviv", 32.0853, 34.7818),
    _N("AWS-IL", "3.120.0.1", "Israel", "Tel Aviv", 32.0853, 34.7818),
    _N("Bezeq", "80.178.0.1", "Israel", "Tel Aviv", 32.0853, 34.7818),
    _N("Cellcom", "62.90.0.1", "Israel", "Tel Aviv", 32.0853, 34.7818),
    _N("HOT", "79.178.0.1", "Israel", "Tel Aviv", 32.0853, 34.7818),

    # Global anycast resolvers
    _N("Google-DNS-1", "8.8.8.8", "Global", "USA", 37.4056, -122.0775),
    _N("Google-DNS-2", "8.8.4.4", "Global", "USA", 37.4056, -122.0775),
    _N("Quad9", "9.9.9.9", "Global", "USA", 37.7749, -122.4194),
    _N("OpenDNS-1", "208.67.222.222", "Global", "USA", 37.7749, -122.4194),
    _N("OpenDNS-2", "208.67.220.220", "Global", "USA", 37.7749, -122.4194),
)


def load_catalog_csv(path: str | Path) -> tuple[ReferenceNode, ...]:
    """Read a catalog from a CSV file with a header row.

    Expected columns: name, address, country, city, latitude, longitude.

    Raises:
        ValueError: if a required column is missing or a row is malformed
        OSError: if the file cannot be read
    """
    path = Path(path)
    nodes = []
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        missing = [name for name in CSV_FIELDS if name not in (reader.fieldnames or ())]
        if missing:
            raise ValueError(f"{path}: missing columns: {', '.join(missing)}")

        for row in reader:
            try:
                nodes.append(
                    ReferenceNode(
                        name=row["name"].strip(),
                        address=row["address"].strip(),
                        country=row["country"].strip(),
                        city=row["city"].strip(),
                        latitude=float(row["latitude"]),
                        longitude=float(row["longitude"]),
                    )
                )
            except (AttributeError, TypeError, ValueError) as e:
                raise ValueError(f"{path}:{reader.line_num}: invalid row: {e}") from None

    logger.info("Loaded %d reference nodes from %s", len(nodes), path)
    return tuple(nodes)
