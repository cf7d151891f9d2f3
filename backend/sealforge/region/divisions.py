"""Administrative division codes (GB/T 2260) for provinces and major cities.

Keys are short names without the 省/市/自治区 suffix; company names are
matched against them by prefix.
"""

from __future__ import annotations

PROVINCES: dict[str, str] = {
    "北京": "110000",
    "天津": "120000",
    "河北": "130000",
    "山西": "140000",
    "内蒙古": "150000",
    "辽宁": "210000",
    "吉林": "220000",
    "黑龙江": "230000",
    "上海": "310000",
    "江苏": "320000",
    "浙江": "330000",
    "安徽": "340000",
    "福建": "350000",
    "江西": "360000",
    "山东": "370000",
    "河南": "410000",
    "湖北": "420000",
    "湖南": "430000",
    "广东": "440000",
    "广西": "450000",
    "海南": "460000",
    "重庆": "500000",
    "四川": "510000",
    "贵州": "520000",
    "云南": "530000",
    "西藏": "540000",
    "陕西": "610000",
    "甘肃": "620000",
    "青海": "630000",
    "宁夏": "640000",
    "新疆": "650000",
}

CITIES: dict[str, str] = {
    "石家庄": "130100",
    "唐山": "130200",
    "太原": "140100",
    "呼和浩特": "150100",
    "沈阳": "210100",
    "大连": "210200",
    "长春": "220100",
    "哈尔滨": "230100",
    "南京": "320100",
    "无锡": "320200",
    "苏州": "320500",
    "杭州": "330100",
    "宁波": "330200",
    "温州": "330300",
    "合肥": "340100",
    "福州": "350100",
    "厦门": "350200",
    "南昌": "360100",
    "济南": "370100",
    "青岛": "370200",
    "郑州": "410100",
    "洛阳": "410300",
    "武汉": "420100",
    "长沙": "430100",
    "广州": "440100",
    "深圳": "440300",
    "珠海": "440400",
    "佛山": "440600",
    "东莞": "441900",
    "南宁": "450100",
    "海口": "460100",
    "成都": "510100",
    "贵阳": "520100",
    "昆明": "530100",
    "拉萨": "540100",
    "西安": "610100",
    "兰州": "620100",
    "西宁": "630100",
    "银川": "640100",
    "乌鲁木齐": "650100",
}

# Stripped after a province/city name when followed by more text
DIVISION_SUFFIXES = ("维吾尔自治区", "壮族自治区", "回族自治区", "自治区", "省", "市")

# Stripped from the front of a name before matching
GENERIC_PREFIXES = ("中华人民共和国", "中国")
