"""Static detection tables for CDN/cloud classification.

Three tables back the classifier, one per detection tier:

- ``ASN_PROVIDERS``: autonomous system number -> (display name, category)
- ``HOSTNAME_SUFFIXES``: ordered (suffix, display name, category); first match wins
- ``IP_PREFIXES``: ordered (textual prefix, display name, category); first match wins

Hostname suffixes are lowercase and include the leading dot, so a bare
registrable domain (``cloudfront.net``) never matches, only names under it.
Order of both tuples is match priority.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .models import ProviderCategory

ASN_PROVIDERS: Dict[int, Tuple[str, ProviderCategory]] = {
    # cdn
    13335: ("Cloudflare", ProviderCategory.CDN),
    209242: ("Cloudflare", ProviderCategory.CDN),
    20940: ("Akamai", ProviderCategory.CDN),
    16625: ("Akamai", ProviderCategory.CDN),
    32787: ("Akamai", ProviderCategory.CDN),
    12222: ("Akamai", ProviderCategory.CDN),
    17204: ("Akamai", ProviderCategory.CDN),
    18680: ("Akamai", ProviderCategory.CDN),
    18717: ("Akamai", ProviderCategory.CDN),
    23454: ("Akamai", ProviderCategory.CDN),
    23455: ("Akamai", ProviderCategory.CDN),
    24319: ("Akamai", ProviderCategory.CDN),
    26008: ("Akamai", ProviderCategory.CDN),
    30675: ("Akamai", ProviderCategory.CDN),
    31107: ("Akamai", ProviderCategory.CDN),
    31108: ("Akamai", ProviderCategory.CDN),
    31109: ("Akamai", ProviderCategory.CDN),
    31110: ("Akamai", ProviderCategory.CDN),
    33905: ("Akamai", ProviderCategory.CDN),
    34164: ("Akamai", ProviderCategory.CDN),
    35204: ("Akamai", ProviderCategory.CDN),
    36183: ("Akamai", ProviderCategory.CDN),
    39836: ("Akamai", ProviderCategory.CDN),
    43639: ("Akamai", ProviderCategory.CDN),
    55409: ("Akamai", ProviderCategory.CDN),
    55770: ("Akamai", ProviderCategory.CDN),
    133103: ("Akamai", ProviderCategory.CDN),
    54113: ("Fastly", ProviderCategory.CDN),
    15133: ("Verizon Edgecast", ProviderCategory.CDN),
    12989: ("StackPath", ProviderCategory.CDN),
    30081: ("StackPath", ProviderCategory.CDN),
    200651: ("KeyCDN", ProviderCategory.CDN),
    200325: ("BunnyCDN", ProviderCategory.CDN),
    22822: ("Limelight", ProviderCategory.CDN),
    38622: ("Limelight", ProviderCategory.CDN),
    36408: ("CDNetworks", ProviderCategory.CDN),
    205544: ("jsDelivr", ProviderCategory.CDN),
    30148: ("Sucuri", ProviderCategory.CDN),
    202468: ("ArvanCloud", ProviderCategory.CDN),
    199524: ("G-Core Labs", ProviderCategory.CDN),
    202422: ("G-Core Labs", ProviderCategory.CDN),

    # cloud
    16509: ("Amazon CloudFront/AWS", ProviderCategory.CLOUD),
    14618: ("Amazon AWS", ProviderCategory.CLOUD),
    8987: ("Amazon AWS", ProviderCategory.CLOUD),
    38895: ("Amazon AWS", ProviderCategory.CLOUD),
    15169: ("Google Cloud", ProviderCategory.CLOUD),
    396982: ("Google Cloud", ProviderCategory.CLOUD),
    19527: ("Google Cloud", ProviderCategory.CLOUD),
    36039: ("Google Cloud", ProviderCategory.CLOUD),
    36040: ("Google Cloud", ProviderCategory.CLOUD),
    41264: ("Google Cloud", ProviderCategory.CLOUD),
    43515: ("Google Cloud", ProviderCategory.CLOUD),
    8075: ("Microsoft Azure", ProviderCategory.CLOUD),
    8068: ("Microsoft", ProviderCategory.CLOUD),
    8069: ("Microsoft", ProviderCategory.CLOUD),
    12076: ("Microsoft Azure", ProviderCategory.CLOUD),
    45102: ("Alibaba Cloud", ProviderCategory.CLOUD),
    37963: ("Alibaba Cloud", ProviderCategory.CLOUD),
    45103: ("Alibaba Cloud", ProviderCategory.CLOUD),
    45090: ("Tencent Cloud", ProviderCategory.CLOUD),
    132203: ("Tencent Cloud", ProviderCategory.CLOUD),
    31898: ("Oracle Cloud", ProviderCategory.CLOUD),
    36351: ("IBM Cloud", ProviderCategory.CLOUD),
    2687: ("IBM Cloud", ProviderCategory.CLOUD),
    14061: ("DigitalOcean", ProviderCategory.CLOUD),
    63949: ("Linode", ProviderCategory.CLOUD),
    20473: ("Vultr", ProviderCategory.CLOUD),
    16276: ("OVHcloud", ProviderCategory.CLOUD),
    24940: ("Hetzner", ProviderCategory.CLOUD),
    12876: ("Scaleway", ProviderCategory.CLOUD),
    25697: ("UpCloud", ProviderCategory.CLOUD),
    7684: ("Sakura Internet", ProviderCategory.CLOUD),
    9370: ("Sakura Internet", ProviderCategory.CLOUD),
    7506: ("GMO Internet", ProviderCategory.CLOUD),
    17511: ("IDCF", ProviderCategory.CLOUD),
    4713: ("NTT Communications", ProviderCategory.CLOUD),
    2516: ("KDDI", ProviderCategory.CLOUD),
    2497: ("IIJ", ProviderCategory.CLOUD),
    23576: ("Naver Cloud", ProviderCategory.CLOUD),

    # hosting
    209366: ("Vercel", ProviderCategory.HOSTING),
    212481: ("Netlify", ProviderCategory.HOSTING),
    60626: ("Heroku", ProviderCategory.HOSTING),
    397373: ("Render", ProviderCategory.HOSTING),
    40509: ("Fly.io", ProviderCategory.HOSTING),
    36459: ("GitHub", ProviderCategory.HOSTING),
    56987: ("GitLab", ProviderCategory.HOSTING),
    53831: ("Squarespace", ProviderCategory.HOSTING),
    58113: ("Wix", ProviderCategory.HOSTING),
    13413: ("Shopify", ProviderCategory.HOSTING),
    2635: ("Automattic/WordPress.com", ProviderCategory.HOSTING),
    62638: ("Pantheon", ProviderCategory.HOSTING),
    46664: ("WP Engine", ProviderCategory.HOSTING),
    395894: ("Kinsta", ProviderCategory.HOSTING),

    # security
    19551: ("Imperva Incapsula", ProviderCategory.SECURITY),
    55002: ("F5 Networks", ProviderCategory.SECURITY),
    38621: ("Radware", ProviderCategory.SECURITY),
    7786: ("Neustar", ProviderCategory.SECURITY),
    19905: ("Neustar", ProviderCategory.SECURITY),
}

HOSTNAME_SUFFIXES: Tuple[Tuple[str, str, ProviderCategory], ...] = (
    # cdn
    (".cloudfront.net", "Amazon CloudFront", ProviderCategory.CDN),
    (".cloudflare.com", "Cloudflare", ProviderCategory.CDN),
    (".akamaiedge.net", "Akamai", ProviderCategory.CDN),
    (".akamai.net", "Akamai", ProviderCategory.CDN),
    (".akamaihd.net", "Akamai", ProviderCategory.CDN),
    (".edgesuite.net", "Akamai", ProviderCategory.CDN),
    (".edgekey.net", "Akamai", ProviderCategory.CDN),
    (".srip.net", "Akamai", ProviderCategory.CDN),
    (".akamaitechnologies.com", "Akamai", ProviderCategory.CDN),
    (".fastly.net", "Fastly", ProviderCategory.CDN),
    (".fastlylb.net", "Fastly", ProviderCategory.CDN),
    (".azureedge.net", "Azure CDN", ProviderCategory.CDN),
    (".vo.msecnd.net", "Azure CDN", ProviderCategory.CDN),
    (".edgecastcdn.net", "Verizon Edgecast", ProviderCategory.CDN),
    (".systemcdn.net", "Verizon Edgecast", ProviderCategory.CDN),
    (".stackpathdns.com", "StackPath", ProviderCategory.CDN),
    (".stackpathcdn.com", "StackPath", ProviderCategory.CDN),
    (".kxcdn.com", "KeyCDN", ProviderCategory.CDN),
    (".b-cdn.net", "BunnyCDN", ProviderCategory.CDN),
    (".bunnycdn.com", "BunnyCDN", ProviderCategory.CDN),
    (".llnwd.net", "Limelight", ProviderCategory.CDN),
    (".lldns.net", "Limelight", ProviderCategory.CDN),
    (".cdnetworks.net", "CDNetworks", ProviderCategory.CDN),
    (".cachefly.net", "CacheFly", ProviderCategory.CDN),
    (".cdn77.org", "CDN77", ProviderCategory.CDN),
    (".jsdelivr.net", "jsDelivr", ProviderCategory.CDN),
    (".unpkg.com", "unpkg", ProviderCategory.CDN),
    (".cdnjs.cloudflare.com", "cdnjs", ProviderCategory.CDN),
    (".gcore.com", "G-Core Labs", ProviderCategory.CDN),

    # cloud
    (".amazonaws.com", "Amazon AWS", ProviderCategory.CLOUD),
    (".awsglobalaccelerator.com", "AWS Global Accelerator", ProviderCategory.CLOUD),
    (".elasticbeanstalk.com", "AWS Elastic Beanstalk", ProviderCategory.CLOUD),
    (".googleapis.com", "Google Cloud", ProviderCategory.CLOUD),
    (".googleusercontent.com", "Google Cloud", ProviderCategory.CLOUD),
    (".ghs.googlehosted.com", "Google", ProviderCategory.CLOUD),
    (".run.app", "Google Cloud Run", ProviderCategory.CLOUD),
    (".appspot.com", "Google App Engine", ProviderCategory.CLOUD),
    (".firebaseapp.com", "Firebase", ProviderCategory.CLOUD),
    (".web.app", "Firebase", ProviderCategory.CLOUD),
    (".azure.com", "Microsoft Azure", ProviderCategory.CLOUD),
    (".azurewebsites.net", "Azure App Service", ProviderCategory.CLOUD),
    (".blob.core.windows.net", "Azure Blob", ProviderCategory.CLOUD),
    (".trafficmanager.net", "Azure Traffic Manager", ProviderCategory.CLOUD),
    (".cloudapp.azure.com", "Azure", ProviderCategory.CLOUD),
    (".digitaloceanspaces.com", "DigitalOcean", ProviderCategory.CLOUD),
    (".ondigitalocean.app", "DigitalOcean App Platform", ProviderCategory.CLOUD),
    (".vultr.com", "Vultr", ProviderCategory.CLOUD),
    (".linode.com", "Linode", ProviderCategory.CLOUD),
    (".linodeobjects.com", "Linode", ProviderCategory.CLOUD),
    (".ovh.net", "OVHcloud", ProviderCategory.CLOUD),
    (".hetzner.com", "Hetzner", ProviderCategory.CLOUD),
    (".scaleway.com", "Scaleway", ProviderCategory.CLOUD),
    (".aliyuncs.com", "Alibaba Cloud", ProviderCategory.CLOUD),
    (".alicdn.com", "Alibaba Cloud CDN", ProviderCategory.CLOUD),
    (".myqcloud.com", "Tencent Cloud", ProviderCategory.CLOUD),
    (".oraclecloud.com", "Oracle Cloud", ProviderCategory.CLOUD),
    (".sakura.ne.jp", "Sakura Internet", ProviderCategory.CLOUD),

    # hosting
    (".vercel.app", "Vercel", ProviderCategory.HOSTING),
    (".now.sh", "Vercel", ProviderCategory.HOSTING),
    (".netlify.app", "Netlify", ProviderCategory.HOSTING),
    (".netlify.com", "Netlify", ProviderCategory.HOSTING),
    (".herokuapp.com", "Heroku", ProviderCategory.HOSTING),
    (".onrender.com", "Render", ProviderCategory.HOSTING),
    (".fly.dev", "Fly.io", ProviderCategory.HOSTING),
    (".railway.app", "Railway", ProviderCategory.HOSTING),
    (".github.io", "GitHub Pages", ProviderCategory.HOSTING),
    (".gitlab.io", "GitLab Pages", ProviderCategory.HOSTING),
    (".pages.dev", "Cloudflare Pages", ProviderCategory.HOSTING),
    (".workers.dev", "Cloudflare Workers", ProviderCategory.HOSTING),
    (".deno.dev", "Deno Deploy", ProviderCategory.HOSTING),
    (".squarespace.com", "Squarespace", ProviderCategory.HOSTING),
    (".wixsite.com", "Wix", ProviderCategory.HOSTING),
    (".myshopify.com", "Shopify", ProviderCategory.HOSTING),
    (".shopifypreview.com", "Shopify", ProviderCategory.HOSTING),
    (".wordpress.com", "WordPress.com", ProviderCategory.HOSTING),
    (".wpcomstaging.com", "WordPress.com", ProviderCategory.HOSTING),
    (".pantheonsite.io", "Pantheon", ProviderCategory.HOSTING),
    (".wpengine.com", "WP Engine", ProviderCategory.HOSTING),
    (".kinsta.cloud", "Kinsta", ProviderCategory.HOSTING),

    # security
    (".incapdns.net", "Imperva Incapsula", ProviderCategory.SECURITY),
    (".impervadns.net", "Imperva", ProviderCategory.SECURITY),
    (".sucuri.net", "Sucuri", ProviderCategory.SECURITY),
)

IP_PREFIXES: Tuple[Tuple[str, str, ProviderCategory], ...] = (
    # cdn
    ("104.16.", "Cloudflare", ProviderCategory.CDN),
    ("104.17.", "Cloudflare", ProviderCategory.CDN),
    ("104.18.", "Cloudflare", ProviderCategory.CDN),
    ("104.19.", "Cloudflare", ProviderCategory.CDN),
    ("104.20.", "Cloudflare", ProviderCategory.CDN),
    ("104.21.", "Cloudflare", ProviderCategory.CDN),
    ("104.22.", "Cloudflare", ProviderCategory.CDN),
    ("104.23.", "Cloudflare", ProviderCategory.CDN),
    ("104.24.", "Cloudflare", ProviderCategory.CDN),
    ("104.25.", "Cloudflare", ProviderCategory.CDN),
    ("104.26.", "Cloudflare", ProviderCategory.CDN),
    ("104.27.", "Cloudflare", ProviderCategory.CDN),
    ("172.64.", "Cloudflare", ProviderCategory.CDN),
    ("172.65.", "Cloudflare", ProviderCategory.CDN),
    ("172.66.", "Cloudflare", ProviderCategory.CDN),
    ("172.67.", "Cloudflare", ProviderCategory.CDN),
    ("173.245.", "Cloudflare", ProviderCategory.CDN),
    ("103.21.", "Cloudflare", ProviderCategory.CDN),
    ("103.22.", "Cloudflare", ProviderCategory.CDN),
    ("103.31.", "Cloudflare", ProviderCategory.CDN),
    ("141.101.", "Cloudflare", ProviderCategory.CDN),
    ("108.162.", "Cloudflare", ProviderCategory.CDN),
    ("190.93.", "Cloudflare", ProviderCategory.CDN),
    ("188.114.", "Cloudflare", ProviderCategory.CDN),
    ("197.234.", "Cloudflare", ProviderCategory.CDN),
    ("198.41.", "Cloudflare", ProviderCategory.CDN),
    ("162.158.", "Cloudflare", ProviderCategory.CDN),
    ("131.0.72.", "Cloudflare", ProviderCategory.CDN),
    ("13.32.", "Amazon CloudFront", ProviderCategory.CDN),
    ("13.33.", "Amazon CloudFront", ProviderCategory.CDN),
    ("13.35.", "Amazon CloudFront", ProviderCategory.CDN),
    ("13.224.", "Amazon CloudFront", ProviderCategory.CDN),
    ("13.225.", "Amazon CloudFront", ProviderCategory.CDN),
    ("13.226.", "Amazon CloudFront", ProviderCategory.CDN),
    ("13.227.", "Amazon CloudFront", ProviderCategory.CDN),
    ("13.249.", "Amazon CloudFront", ProviderCategory.CDN),
    ("18.64.", "Amazon CloudFront", ProviderCategory.CDN),
    ("18.154.", "Amazon CloudFront", ProviderCategory.CDN),
    ("18.160.", "Amazon CloudFront", ProviderCategory.CDN),
    ("18.164.", "Amazon CloudFront", ProviderCategory.CDN),
    ("18.165.", "Amazon CloudFront", ProviderCategory.CDN),
    ("18.172.", "Amazon CloudFront", ProviderCategory.CDN),
    ("52.84.", "Amazon CloudFront", ProviderCategory.CDN),
    ("52.85.", "Amazon CloudFront", ProviderCategory.CDN),
    ("54.182.", "Amazon CloudFront", ProviderCategory.CDN),
    ("54.192.", "Amazon CloudFront", ProviderCategory.CDN),
    ("54.230.", "Amazon CloudFront", ProviderCategory.CDN),
    ("54.239.128.", "Amazon CloudFront", ProviderCategory.CDN),
    ("54.239.192.", "Amazon CloudFront", ProviderCategory.CDN),
    ("70.132.", "Amazon CloudFront", ProviderCategory.CDN),
    ("99.84.", "Amazon CloudFront", ProviderCategory.CDN),
    ("99.86.", "Amazon CloudFront", ProviderCategory.CDN),
    ("143.204.", "Amazon CloudFront", ProviderCategory.CDN),
    ("204.246.", "Amazon CloudFront", ProviderCategory.CDN),
    ("205.251.", "Amazon CloudFront", ProviderCategory.CDN),
    ("216.137.", "Amazon CloudFront", ProviderCategory.CDN),
    ("151.101.", "Fastly", ProviderCategory.CDN),
    ("199.232.", "Fastly", ProviderCategory.CDN),

    # hosting
    ("76.76.21.", "Vercel", ProviderCategory.HOSTING),

    # cdn (IPv6, compressed lowercase notation)
    ("2606:4700:", "Cloudflare", ProviderCategory.CDN),
    ("2803:f800:", "Cloudflare", ProviderCategory.CDN),
    ("2405:b500:", "Cloudflare", ProviderCategory.CDN),
    ("2405:8100:", "Cloudflare", ProviderCategory.CDN),
    ("2a06:98c0:", "Cloudflare", ProviderCategory.CDN),
    ("2c0f:f248:", "Cloudflare", ProviderCategory.CDN),
    ("2600:9000:", "Amazon CloudFront", ProviderCategory.CDN),
    ("2a04:4e40:", "Fastly", ProviderCategory.CDN),
    ("2a04:4e42:", "Fastly", ProviderCategory.CDN),
)
